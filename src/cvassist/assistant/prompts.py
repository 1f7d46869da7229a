"""Prompt text for the CV assistant — edit to customize the persona or task wording."""

from __future__ import annotations

SYSTEM_PROMPT = """\
You are an expert CV/resume assistant. You help users improve their resumes, write cover letters, prepare for interviews, and provide career advice.

When responding:
- Be professional, helpful, and encouraging
- Provide specific, actionable advice
- Use proper formatting with bullet points and clear structure
- Focus on CV/resume best practices
- Be concise but comprehensive
- If asked about specific CV sections, provide detailed guidance

The user's current CV data is provided below for context. Use this information to give personalized advice."""

INTERVIEW_QUESTIONS_PROMPT = (
    "Based on my CV, generate potential interview questions I might be asked "
    "and provide tips on how to answer them effectively."
)

SKILL_SUGGESTIONS_PROMPT = (
    "Based on my experience and education, suggest additional skills I should "
    "consider adding to my CV to make it more competitive."
)


def build_prompt(user_message: str, cv_context: str) -> str:
    """Combine persona, CV context and the user's request into one prompt."""
    return (
        f"{SYSTEM_PROMPT}\n\n"
        f"Here is my current CV data:\n\n{cv_context}\n\n"
        f"User question: {user_message}\n\n"
        "Please provide helpful advice:"
    )


def cover_letter_prompt(
    job_description: str | None = None,
    company_name: str | None = None,
) -> str:
    parts = ["Generate a professional cover letter based on my CV."]
    if job_description:
        parts.append(f"The job description is: {job_description}")
    if company_name:
        parts.append(f"The company is: {company_name}")
    return " ".join(parts)


def improve_section_prompt(section_type: str, current_content: str) -> str:
    return (
        f"Help me improve my {section_type} section. "
        f"Current content: {current_content}. "
        "Please provide suggestions for improvement and a rewritten version."
    )
