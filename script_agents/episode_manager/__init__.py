"""
Episode manager agent: spreadsheet queries, scheduler control and health.
"""
