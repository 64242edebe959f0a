"""Prompt construction for roadmap generation and code visualization."""

from typing import NamedTuple


class PromptPair(NamedTuple):
    """System and user instructions for one generation call."""

    system: str
    user: str


# ============================================================================
# Roadmap
# ============================================================================

ROADMAP_SYSTEM_PROMPT = """You are an expert learning path designer specializing in technology education.
Create structured, achievable learning roadmaps with realistic time estimates.
You must return ONLY valid JSON without any markdown formatting, code blocks, or additional text."""

ROADMAP_SCHEMA = """{
  "title": "Brief roadmap title (max 60 chars)",
  "topics": [
    {
      "title": "Topic name",
      "description": "Detailed description of what to learn",
      "estimated_hours": 8,
      "learning_objectives": ["objective 1", "objective 2", "objective 3"],
      "order": 1,
      "video_suggestions": ["YouTube search query 1", "YouTube search query 2"],
      "practice_questions": [
        {"title": "Problem name", "difficulty": "Easy", "platform": "LeetCode", "url": "https://..."}
      ]
    }
  ]
}"""


def build_roadmap_prompt(
    goal: str,
    total_days: int,
    hours_per_day: float,
    skill_level: str,
    focus_areas: list[str],
) -> PromptPair:
    """Build the roadmap generation prompt.

    The topic count, objective count and hour budget are instructions to the
    model only; nothing enforces them on the returned plan.
    """
    total_hours = total_days * hours_per_day
    focus = ", ".join(focus_areas) if focus_areas else "None specified"

    user = f"""Create a comprehensive learning roadmap for the following:

Goal: {goal}
Available time: {total_days} days at {hours_per_day:.10g} hours per day (Total: {total_hours:.10g} hours)
Current skill level: {skill_level}
Focus areas: {focus}

Return ONLY a JSON object with this exact structure (no markdown, no code blocks):
{ROADMAP_SCHEMA}

IMPORTANT:
- Create 8-15 topics that fit within the available time
- Ensure topics are ordered logically with dependencies
- Number topics with "order" starting at 1, with no gaps or duplicates
- Each topic should have 3-5 learning objectives
- Total estimated hours should not exceed {total_hours:.10g} hours
- Adapt complexity to the {skill_level} skill level
- video_suggestions are search queries, not links
- practice_questions difficulty must be one of Easy, Medium, Hard
- Return ONLY the JSON object, no other text"""

    return PromptPair(system=ROADMAP_SYSTEM_PROMPT, user=user)


# ============================================================================
# Code visualization
# ============================================================================

VISUALIZE_SYSTEM_PROMPT = """You are an expert programming instructor who traces code execution step by step.
Explain what each executed line does and how variable values change.
You must return ONLY valid JSON without any markdown formatting, code blocks, or additional text."""


def build_visualization_prompt(code: str, language: str) -> PromptPair:
    user = f"""Trace the execution of the following {language} code step by step:

{code}

Return ONLY a JSON object with this exact structure (no markdown, no code blocks):
{{
  "steps": [
    {{
      "step": 1,
      "line": 1,
      "description": "What happens when this line executes",
      "variables": {{"name": "current value"}},
      "highlight": "the code fragment being executed"
    }}
  ],
  "summary": "Short explanation of what the program does overall"
}}

IMPORTANT:
- Number steps starting at 1 in execution order
- "line" is the 1-based source line being executed
- "variables" holds every variable in scope after the step
- Keep the trace under 30 steps; summarize repetitive loop iterations
- Return ONLY the JSON object, no other text"""

    return PromptPair(system=VISUALIZE_SYSTEM_PROMPT, user=user)
