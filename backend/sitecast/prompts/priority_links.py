"""Prompt for choosing the most informative links on an organization's home page."""

PRIORITY_LINKS_PROMPT = """You will be provided URLs from the main page of a website for an organization. Determine which links may contain important information related to the organization. Examples include "/about", "/events", "/blog", "/programs", and "/services". Try to limit the number of links to around {max_links} links. You do not need to fill {max_links} links if there are not that many relevant links.

## Output Format

Return ONLY a JSON array of the chosen links, most important first:
["Link1", "Link2", "Link3"]

Do not return anything else other than the JSON array.

## Links

{links}"""
