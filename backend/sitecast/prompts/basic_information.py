"""Prompt for extracting an organization's contact details from its pages."""

BASIC_INFORMATION_PROMPT = """You will be provided the contents from pages of an organization. Extract the following information: Organization Name, Address, Phone Number, Email, and EIN. Make sure that the phone number is NOT a fax. If any of these are not available, return a blank string.

## Output Format

Return ONLY a valid JSON object:
{{
  "organizationName": "",
  "address": "",
  "phoneNumber": "",
  "email": "",
  "ein": ""
}}

## Pages

{page_bodies}"""
