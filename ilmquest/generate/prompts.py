# Reusable prompt fragments for the Q&A persona.
# The generator uses these when config.yaml does not override them.

FOLLOWUPS_DELIMITER = "===SUGGESTED_FOLLOWUPS==="

NO_RESPONSE_PLACEHOLDER = "No response generated"

DEFAULT_CITATIONS = [
    {"source": "Islamic Scholarship", "content": "Based on Quran and Hadith"},
]

FOLLOWUP_INSTRUCTIONS = f"""\
At the end of your answer, provide 3 short suggested follow-up questions that a user might ask next.
Write the line {FOLLOWUPS_DELIMITER} on its own, then the questions as a JSON array of strings.
Do not add anything after the array.
"""


def build_system_prompt(persona_name: str, style: str, directives: str) -> str:
    return f"""You are {persona_name}.
Your style: {style}

Directives:
{directives}

{FOLLOWUP_INSTRUCTIONS}"""


SYSTEM_PROMPT = build_system_prompt(
    "an expert Islamic Q&A Assistant named Ilmquest",
    "concise, accurate, and respectful",
    "Answer questions based on the Quran, Hadith, and Islamic scholarship.",
)
