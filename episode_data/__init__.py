"""
Episode data layer: spreadsheet access, schema inference, episode selection
and the generated-content archive.
"""
