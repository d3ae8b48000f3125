"""
SEO title, tag and episode description prompt templates.
"""

SEO_TITLE_SYSTEM = (
    "You are a podcast SEO expert. Generate concise, compelling episode titles "
    "that are exactly 60-70 characters."
)

SEO_TITLE_PROMPT = """
Generate an SEO-optimized podcast episode title for the following topic:

Topic: ${topic}
Host: ${host_name}
Style: CPTSD-focused, compassionate, authentic

Requirements:
- 60-70 characters exactly
- Include "CPTSD:" prefix
- Include the main topic
- Include a key benefit or outcome
- Use ${host_name}'s warm, authentic voice
- Avoid clickbait, be genuine and helpful

Format: CPTSD: [Topic] - [Key Benefit]

Example: CPTSD: Healing Childhood Trauma - Finding Inner Peace

Generate the title:
"""

SEO_TAGS_SYSTEM = "You are a podcast SEO expert. Generate exactly 20 relevant, searchable tags."

SEO_TAGS_PROMPT = """
Generate 20 SEO-optimized tags for a CPTSD podcast episode about: ${topic}

Requirements:
- Exactly 20 tags
- Include CPTSD, trauma, healing, mental health
- Be specific to the topic
- Use lowercase, comma-separated
- Include both broad and specific terms
- Focus on search terms people actually use

Format: tag1,tag2,tag3,...,tag20

Generate the tags:
"""

DESCRIPTION_SYSTEM = (
    "You are a podcast marketing expert. Generate compelling episode descriptions "
    "that follow the exact format specified."
)

DESCRIPTION_PROMPT = """
Generate a compelling podcast episode description for the following CPTSD episode:

Topic: ${topic}
Host: ${host_name}
Style: CPTSD-focused, compassionate, authentic

Script Sections:
${section_previews}

Requirements:
- 80-120 words engaging introduction with **key terms in bold**
- Include 5 key takeaways
- Include 5 discoveries
- Include 3-5 resources mentioned
- Include next episode preview
- Include contact email (${email}) and supporters club call-to-action
- Use ${host_name}'s warm, authentic voice
- Be specific and actionable
- Include the supporters club URL: ${supporters_club_url}
"""
