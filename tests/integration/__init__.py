"""
Integration tests for the civic complaint classifier.

Test the wired engine against the real Sarvam and OpenRouter APIs,
marked with @pytest.mark.integration and skipped without API keys.
"""
