"""
提示词模板
"""

MATCH_QUESTION_COUNT = 5

MATCH_PROMPT_TEMPLATE = """Generate a match score and {question_count} short interview questions to test a candidate's knowledge based on the following resume and job description.
<resume>
{resume_text}
</resume>
<job-description>
{job_description}
</job-description>"""


def build_match_prompt(resume_text: str, job_description: str) -> str:
    """把简历文本和职位描述嵌入匹配提示词（两者都可以为空）"""
    return MATCH_PROMPT_TEMPLATE.format(
        question_count=MATCH_QUESTION_COUNT,
        resume_text=resume_text,
        job_description=job_description
    )
