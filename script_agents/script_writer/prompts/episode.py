"""
Full-episode script prompt template.
"""

EPISODE_SCRIPT_PROMPT = """
Generate a complete CPTSD podcast script for the following episode:

EPISODE DETAILS:
- Topic: ${topic}
- Host: ${host_name} (${voice_style} voice)
- Type: ${episode_template}
- Target: ~${target_words} words total

REQUIREMENTS:
${requirements}

STRUCTURE (follow exactly):
${structure}

Generate the complete script with each section clearly labeled and the specified word count targets.
"""

EPISODE_REQUIREMENTS = {
    "main": [
        "Follow ${host_name}'s warm, authentic, compassionate voice",
        "Include personal stories and vulnerability",
        "Provide scientific backing with accessible explanations",
        "Focus on community and shared experiences",
        "Include practical, actionable tools",
        "End with hope and connection"
    ],
    "friday": [
        "Follow ${host_name}'s warm, authentic, compassionate voice",
        "Focus on hope, healing, and community support",
        "Be gentle and nurturing (Friday healing style)",
        "Include personal stories and vulnerability",
        "Provide practical healing techniques",
        "End with gentle wrap-up and next episode preview"
    ]
}
