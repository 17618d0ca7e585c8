"""
Record pipeline stages: parse, enrich, filter, sort, summarize, export.
"""
