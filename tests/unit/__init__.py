"""
Unit tests for the civic complaint classifier.

Test individual components in isolation:
- Taxonomy tables and normalizer
- Prompt builder (taxonomy listing, truncation, model choice)
- Provider clients (httpx.MockTransport, failure mapping)
- Response pipeline stages (each stage with positive/negative cases)
- Classification engine (fallback state machine with mock clients)
"""
