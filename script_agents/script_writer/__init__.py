"""
Script writer agent: drafts episode scripts, SEO copy and descriptions.
"""
