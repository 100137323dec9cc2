"""
Text analysis for the search engine.

- analyzers: regex tokenizer and lowercase filter shared by indexing and querying
"""
