"""
Cold Email Prompt

Single user-role prompt asking for an original, personalized job-application
cold email. Context lines for the recruiter and links are optional and are
filled into {extra_context} only when the applicant supplied them.
"""

USER_PROMPT_TEMPLATE = """
Create a unique and personalized cold email for a job application with the following requirements:

Context:
- Applicant: {name}, {role}
- Target: {target_role} at {company_name}
- Experience: {experience}
- Skills: {skills}
- Key Projects: {projects}
- Tone: {tone}
{extra_context}
Requirements:
1. Write a completely original email that sounds like it was written by a real person
2. Use natural language and vary sentence structure
3. Include specific details about the applicant's experience and skills
4. Reference the company's industry and needs
5. No templates or formulaic structures
6. Make every sentence unique and contextual
7. Add personal insights about why this specific role at this company

Output Format:
- Include a clear subject line
- Use proper email structure
- Add a professional signature if provided links exist
"""

RECRUITER_LINE = "- Recruiter: {recruiter_name}\n"
PORTFOLIO_LINE = "- Portfolio: {portfolio_link}\n"
LINKEDIN_LINE = "- LinkedIn: {linkedin_link}\n"
