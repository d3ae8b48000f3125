"""
MCP agents that draft CPTSD podcast scripts from the episode spreadsheet.
"""
