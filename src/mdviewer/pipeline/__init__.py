"""Rendering pipeline: preprocessing, Markdown conversion and HTML post-passes."""
