"""
Prompt builder for classification requests.

Responsible for:
- Loading and rendering the Jinja2 classification template
- Listing the full taxonomy as display/key pairs
- Truncating long descriptions at a sentence boundary
- Constructing the provider-neutral LLMGenerationRequest

Rendering is a pure function of (description, image_url) and the static
taxonomy, so the same complaint always produces the same prompt.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined
import structlog

from civic_triage.llm.text_utils import truncate_at_sentence_boundary
from civic_triage.models.enums import ComplaintCategory, Department, Severity
from civic_triage.models.llm_models import LLMGenerationRequest
from civic_triage.models.taxonomy import taxonomy_pairs


logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "prompts"
TEMPLATE_NAME = "classification_prompt.txt"


class PromptBuilder:
    """
    Build classification prompts from complaint inputs.

    Handles:
    - Template rendering (Jinja2)
    - Taxonomy enumeration (categories, severities, departments)
    - Description truncation (sentence boundary)
    - Model choice (vision model when an image is attached)
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        description_limit: int = 2000,
        default_temperature: float = 0.1,
        default_max_tokens: int = 500,
    ):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing classification_prompt.txt
                (defaults to the templates shipped with the package)
            description_limit: Max description characters sent to the model
            default_temperature: Temperature for built requests
            default_max_tokens: Completion limit for built requests
        """
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self.description_limit = description_limit
        self.default_temperature = default_temperature
        self.default_max_tokens = default_max_tokens

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,  # We're generating prompts, not HTML
            undefined=StrictUndefined,
        )

        try:
            self.template = self.jinja_env.get_template(TEMPLATE_NAME)
            logger.info("Loaded prompt template", templates_dir=str(self.templates_dir))
        except Exception as e:
            logger.error("Failed to load prompt template", error=str(e), templates_dir=str(self.templates_dir))
            raise

        # Taxonomy is static; compute the listings once
        self._categories = taxonomy_pairs(ComplaintCategory)
        self._severities = taxonomy_pairs(Severity)
        self._departments = taxonomy_pairs(Department)

    def build_prompt(
        self,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> str:
        """
        Render the classification prompt.

        Args:
            description: Complaint text, embedded verbatim (after truncation)
            image_url: URL of the complaint photo

        Returns:
            Rendered prompt as string
        """
        if description:
            description = truncate_at_sentence_boundary(description.strip(), self.description_limit)

        if description and image_url:
            evidence = "description and image"
        elif image_url:
            evidence = "image"
        else:
            evidence = "description"

        rendered = self.template.render(
            categories=self._categories,
            severities=self._severities,
            departments=self._departments,
            description=description or None,
            image_url=image_url or None,
            evidence=evidence,
        ).strip()

        logger.debug(
            "Classification prompt built",
            prompt_length=len(rendered),
            has_description=bool(description),
            has_image=bool(image_url),
        )
        return rendered

    def build_request(
        self,
        description: Optional[str],
        image_url: Optional[str],
        model: str,
    ) -> LLMGenerationRequest:
        """
        Build a complete LLMGenerationRequest for one provider.

        Args:
            description: Complaint text
            image_url: Complaint photo URL
            model: Model chosen by the client (``BaseLLMClient.model_for``)

        Returns:
            LLMGenerationRequest ready for ``BaseLLMClient.generate``
        """
        prompt = self.build_prompt(description, image_url)

        return LLMGenerationRequest(
            prompt=prompt,
            model=model,
            temperature=self.default_temperature,
            max_tokens=self.default_max_tokens,
            image_url=image_url or None,
        )
