"""
Google Docs import pipeline: normalizes a document and converts it into
blog post HTML with its images copied into object storage.
"""
