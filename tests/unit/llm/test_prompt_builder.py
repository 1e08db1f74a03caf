"""Unit tests for PromptBuilder."""

import pytest
from jinja2 import TemplateNotFound

from civic_triage.llm.prompt_builder import PromptBuilder
from civic_triage.models.enums import ComplaintCategory, Department, Severity
from civic_triage.models.taxonomy import taxonomy_pairs


POTHOLE = "There is a huge pothole causing accidents near the market"
IMAGE_URL = "https://storage.example.com/complaints/abc123.jpg"


class TestBuildPrompt:

    @pytest.mark.parametrize("enum_cls", [ComplaintCategory, Severity, Department])
    def test_lists_every_display_key_pair(self, prompt_builder, enum_cls):
        prompt = prompt_builder.build_prompt(POTHOLE)

        for display, key in taxonomy_pairs(enum_cls):
            assert f'"{display}" (use: "{key}")' in prompt

    def test_embeds_description_verbatim(self, prompt_builder):
        prompt = prompt_builder.build_prompt(POTHOLE)

        assert f'Complaint Description: "{POTHOLE}"' in prompt
        assert "Complaint Image URL" not in prompt
        assert "IMAGE CHECK" not in prompt
        assert "Based on the description," in prompt

    def test_image_only(self, prompt_builder):
        prompt = prompt_builder.build_prompt(None, IMAGE_URL)

        assert f"Complaint Image URL: {IMAGE_URL}" in prompt
        assert "IMAGE CHECK" in prompt
        assert "Complaint Description" not in prompt
        assert "Based on the image," in prompt

    def test_description_and_image(self, prompt_builder):
        prompt = prompt_builder.build_prompt(POTHOLE, IMAGE_URL)

        assert POTHOLE in prompt
        assert IMAGE_URL in prompt
        assert "Based on the description and image," in prompt
        assert "trust the image" in prompt

    def test_includes_response_format_and_examples(self, prompt_builder):
        prompt = prompt_builder.build_prompt(POTHOLE)

        assert '"classifiable": true' in prompt
        assert '"category": "ROAD_DAMAGE"' in prompt
        assert prompt.count('"category": "NOT_A_COMPLAINT"') >= 2
        assert "ONLY the JSON object" in prompt

    def test_rendering_is_deterministic(self, prompt_builder):
        assert prompt_builder.build_prompt(POTHOLE, IMAGE_URL) == prompt_builder.build_prompt(POTHOLE, IMAGE_URL)

    def test_long_description_truncated(self):
        builder = PromptBuilder(description_limit=60)
        description = "The drain on 5th cross is overflowing. " + "Sewage everywhere " * 50

        prompt = builder.build_prompt(description)

        assert "The drain on 5th cross is overflowing." in prompt
        assert "Sewage everywhere Sewage" not in prompt

    def test_custom_templates_dir(self, tmp_path):
        (tmp_path / "classification_prompt.txt").write_text(
            "{{ evidence }}: {{ description }} ({{ categories | length }} categories)"
        )
        builder = PromptBuilder(templates_dir=tmp_path)

        assert builder.build_prompt("Garbage pile") == (
            f"description: Garbage pile ({len(ComplaintCategory)} categories)"
        )

    def test_missing_template_raises(self, tmp_path):
        with pytest.raises(TemplateNotFound):
            PromptBuilder(templates_dir=tmp_path)


class TestBuildRequest:

    def test_text_only_request(self, prompt_builder):
        request = prompt_builder.build_request(POTHOLE, None, model="deepseek/deepseek-chat")

        assert request.model == "deepseek/deepseek-chat"
        assert request.image_url is None
        assert POTHOLE in request.prompt

    def test_image_request_carries_url(self, prompt_builder):
        request = prompt_builder.build_request(None, IMAGE_URL, model="google/gemini-2.0-flash-001")

        assert request.model == "google/gemini-2.0-flash-001"
        assert request.image_url == IMAGE_URL
        assert IMAGE_URL in request.prompt

    def test_generation_defaults(self):
        builder = PromptBuilder(default_temperature=0.0, default_max_tokens=300)
        request = builder.build_request(POTHOLE, None, model="sarvam-m")

        assert request.temperature == 0.0
        assert request.max_tokens == 300
