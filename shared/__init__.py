"""
Dataclass models and errors shared by the import pipeline and the blog API.
"""
