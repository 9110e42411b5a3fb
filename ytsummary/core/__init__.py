"""
Core functionality for the YouTube video summarization application.

This package contains modules for resolving video identifiers, fetching and
cleaning transcripts, clipping them to a word budget and summarizing them.
"""
