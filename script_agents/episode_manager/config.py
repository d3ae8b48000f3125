"""
Configuration specific to the episode manager agent.
"""

AGENT_INSTRUCTIONS = """
This is the Episode Manager Agent - the window onto the CPTSD Recovery episode spreadsheet.

Key responsibilities:
1. List, search and rank upcoming episodes from the Google Sheet
2. Report episode statistics and how the sheet's columns were recognised
3. Run the daily script scheduler (06:00 America/New_York by default)
4. Report health of the spreadsheet and OpenAI connections

Only rows in a mental-health category with a CPTSD/PTSD title are treated as episodes.
"""
