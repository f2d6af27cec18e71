"""
Core functionality for the SEO article machine.

This package contains the Gemini service, the prompt templates and the
wizard state that drives the three-step flow.
"""
