"""Prompts for two-host podcast scripts about an organization.

Each paragraph of the generated script is read by one speaker; speakers
alternate by paragraph order, so the prompts forbid speaker labels.
"""

_LEGACY_BODY = (
    'You are an expert script writer. Create a script for an audio overview of the organization "{organization_name}". '
    "The script should be informative and conversational. Do not introduce the script with a title. "
    "The audience is primarily low vision or blind people. Appropriately use the following details:\n\n"
    "Website: {website_url}\n"
    "Email: {email}\n"
    "Phone: {phone_number}\n"
    "Address: {address}\n"
    "Website Body Texts: \n{page_bodies}\n"
    "If applicable, give a list and description of the services and the events that the organization offers. "
    "Do not sound like an advertisement, and do not mention one off events. "
    "Only mention regularly held events (i.e. Book Clubs or Meetings). "
    "If there are no events or meetings, do not mention them and skip over them.\n"
    "The script should be approximately 5 minutes long when read aloud. You may go up to 7 minutes. "
    "Do not use any offensive terms, such as 'blind' or 'visually impaired'. "
    "Instead, use terms like 'low vision' or 'people with low vision' or 'people who are blind'.\n"
    "\n\nThe script will be read by 2 alternating speakers. Structure the script so that each paragraph "
    "represents a block of text to be read by one speaker before switching to the other. "
    "Ensure paragraphs are separated by a double newline (\\n\\n). "
    'Do not label the speakers (e.g., "Host 1:", "Speaker 2:").'
)

# Used by the one-shot podcast endpoint and the batch processor
PODCAST_PROMPT = _LEGACY_BODY

LEGACY_SCRIPT_PROMPT = _LEGACY_BODY + (
    " Do not introduce the script with any meta commentary, explanation, or an outline of what will be covered. "
    "Instead, directly go into the podcast dialogue. "
    'Do not say something along the lines of "Welcome to the show."'
)

CONVERSATIONAL_SCRIPT_PROMPT = """Generate a podcast-style audio overview script based on the provided content for "{organization_name}". The output should be a conversational script between two AI hosts discussing the main points, insights, and implications of the input material. Do not include a separate title line; begin directly with the script content. Do not give the podcast a name. Just start talking about the subject.

Context and contact details (use where helpful, but do not read lists verbatim):
Website: {website_url}
Email: {email}
Phone: {phone_number}
Address: {address}

Website Body Texts: 
{page_bodies}

Podcast Format:
- Duration: Aim for a 5-7 minute discussion (approximately 750-1,000 words). You may go over this range if necessary to cover important points; use judgment and prioritize clarity and usefulness.
- Style: Informative yet casual, resembling a professional podcast.
- Listener: Busy professionals who want efficient, high-value information.

Host Personas (make these voices clear in tone, but DO NOT label lines):
- Host 1: The "Explainer" - knowledgeable, articulate, breaks down complex concepts.
- Host 2: The "Questioner" - curious, insightful, asks thought-provoking questions.
Maintain a collegial, respectful dynamic with light, friendly banter.

Podcast Structure (follow this structure but feel free to adjust lengths as needed):
1) Outline: Begin with a concise outline of the topics you will cover (a short bullet-style plan).
2) Introduction (~80-100 words): Introduce hosts and the topic; provide a clear hook.
3) Overview (~150-200 words): Summarize the key points and context from the source material.
4) Main Discussion (~500-700 words): Analyze, debate, and discuss details and implications; use examples and practical takeaways. If needed, expand this section to fully explore complex or important points.
5) Conclusion (~60-100 words): Recap key takeaways and end with a thought-provoking comment or question.

Additional directions:
- Identify core concepts, arguments, and significant details from the provided content.
- Organize the discussion logically (outline -> intro -> overview -> deep dive -> conclusion).
- Use clear, accessible language and natural speech patterns; include occasional realistic speech elements ("um", "you know", short laughs or light banter) for authenticity.
- Present controversial topics with neutrality and show multiple sides where appropriate.
- Avoid sounding like an advertisement. If the source lists events, mention only regularly held events, not one-off occurrences.
- Refine the output: begin with an outline, develop a coherent draft, then add small speech-level edits so the script reads naturally when spoken.

The script will be read by two alternating speakers. Structure the script so that each paragraph represents a block of text to be read by one speaker before switching to the other. Ensure paragraphs are separated by a double newline (\\n\\n). Do not prefix paragraphs with explicit labels such as "Host 1:" or "Host 2:" - the alternation will be inferred by paragraph order. Do not introduce the script with any meta commentary, explanation, or an outline of what will be covered. Instead, directly go into the podcast dialogue. Do not say something along the lines of "Welcome to the show.\""""

ACCESSIBLE_SCRIPT_PROMPT = """You are an expert content creator specializing in accessible audio resources for the low vision and blind community. Your goal is to convert written information about "{organization_name}" into a natural, engaging podcast script.

STRICT FORMATTING RULES (CRITICAL):
1. The output must contain ONLY the spoken dialogue.
2. Do NOT use speaker labels (e.g., "Host 1:" or "Speaker A:").
3. Do NOT include titles, scene descriptions, sound effects, or an outline.
4. SEPARATOR: Separate each speaker's turn with a double line break (two empty lines of whitespace). Do NOT write the literal characters "\\n\\n" or any visible separator tags. Just use blank space.
5. Ensure the script starts immediately with the first speaker's voice.

INPUT CONTEXT:
Organization: {organization_name}
Website: {website_url}
Email: {email}
Phone: {phone_number}
Address: {address}

SOURCE MATERIAL:
\"\"\"
Website Body Texts: 
{page_bodies}
\"\"\"

HOST PERSONAS (Alternating speakers):
- Speaker A (The Guide): Warm, descriptive, and articulate. Focuses on the "what" and "where."
- Speaker B (The Advocate): Curious and practical. Focuses on the "how" and "why it matters."

CONTENT GUIDELINES:
- ZERO FLUFF START: The very first sentence of the script must explicitly name "{organization_name}" and immediately define what it is. Do NOT use phrases like "Welcome back," "Hello listeners," or "Today we are looking at."
- LANGUAGE & TERMINOLOGY: STRICTLY AVOID the term "visually impaired." Instead, use "low vision," "people with low vision," "the low vision community," or "blind" (only where specifically accurate).
- Tone: Informative, encouraging, and conversational. Avoid overly corporate jargon.
- Accessibility Focus: If the content mentions physical locations or visual elements, describe them clearly. If reading a phone number, group the digits naturally for a listener to memorize (e.g. "five-five-five...").

STRUCTURE:
   1. Immediate Hook: Start directly with the organization name and its core value proposition.
   2. Overview: Summarize what the organization does.
   3. Deep Dive: Discuss specific programs, events, or resources found in the source text. Discuss why this is useful for the low vision community.
   4. Contact Info: Weave the website or phone number naturally into the end of the conversation.
   5. Sign-off: A brief, warm closing.

Generate the script now."""

# promptType values accepted by the script endpoint
SCRIPT_PROMPTS = {
    0: LEGACY_SCRIPT_PROMPT,
    1: CONVERSATIONAL_SCRIPT_PROMPT,
    2: ACCESSIBLE_SCRIPT_PROMPT,
}
