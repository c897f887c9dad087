"""
The serialization engine: renders resource instances into write documents and
extracts them back from response documents.
"""
