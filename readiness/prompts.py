"""
Prompt phân tích mức độ sẵn sàng placement.
Model được yêu cầu trả về JSON đúng schema REPORT_SCHEMA_TEXT.
"""

REPORT_SCHEMA_TEXT = """{
  "consistency_analysis": "<short paragraph>",
  "weak_areas": ["<weak area>", "..."],
  "strengths": ["<strength>", "..."],
  "action_plan": {
    "days_1_to_3": "<action>",
    "days_4_to_5": "<action>",
    "days_6_to_7": "<action>"
  },
  "readiness_score": <integer 0-100>
}"""

PROMPT_TEMPLATE = """Analyze the following student placement preparation data collected over recent days.

Student Profile:
- Target Role: {target_role}
- Branch: {branch}
- Graduation Year: {graduation_year}

Daily Preparation Logs:
{logs}

Your tasks:
1. Analyze preparation consistency (frequency, gaps, streaks).
2. Identify weak areas based on low or irregular time spent.
3. Identify strengths based on consistent effort.
4. Suggest clear, practical next steps for the next 7 days.
5. Provide an overall readiness score out of 100 for the target role.

Respond with a single JSON object and nothing else, using exactly this shape:
{schema}

Rules:
- Be concise and realistic
- Avoid motivational fluff
- No emojis
- No long explanations"""


def _format_hours(value):
    return f"{float(value or 0):g}"


def format_core_subjects(core_subjects):
    if not core_subjects:
        return "  - None"

    lines = []
    for cs in core_subjects:
        line = f"  - {cs.get('name', '')}: {_format_hours(cs.get('hours'))} hours"
        topics = cs.get('topics')
        if topics:
            line += f" (topics: {', '.join(topics)})"
        lines.append(line)
    return "\n".join(lines)


def format_daily_logs(logs):
    """Mỗi log 1 block, đánh số theo thứ tự thời gian (cũ nhất là Day 1)."""
    if not logs:
        return "No daily logs available."

    blocks = []
    for index, log in enumerate(logs, start=1):
        blocks.append(
            f"Day {index} ({log['date']}):\n"
            f"- DSA Hours: {_format_hours(log.get('dsa_hours'))}\n"
            f"- DSA Topics: {log.get('dsa_topics') or 'None'}\n"
            f"- Core Subjects:\n{format_core_subjects(log.get('core_subjects'))}\n"
            f"- Projects/Practice: {log.get('projects') or 'None'}\n"
            f"- Self-Rating: {log.get('self_rating')}/5"
        )
    return "\n\n".join(blocks)


def build_readiness_prompt(profile, logs, target_role):
    return PROMPT_TEMPLATE.format(
        target_role=target_role,
        branch=profile.get('branch', ''),
        graduation_year=profile.get('graduation_year', ''),
        logs=format_daily_logs(logs),
        schema=REPORT_SCHEMA_TEXT,
    )
