"""
Classification engine: the provider fallback state machine.

States:
    NOT_STARTED -> INPUT_CHECK -> PRIMARY_ATTEMPT -> [SECONDARY_ATTEMPT]
    -> [PRIMARY_RETRY] -> DONE

Policy:
    1. Input check: empty, too short or gibberish submissions short-circuit
       to the unclassifiable result with no provider call.
    2. Primary attempt: prompt -> provider -> parse -> normalize -> validate.
       Any failure along the way means "no result".
    3. An all-defaults primary answer (OTHER / MEDIUM / OTHER) is a hidden
       failure and triggers fallback.
    4. Secondary attempt, if the other provider has a key.
    5. Retry, if the provider that has not been called yet has a key. A
       provider is never called twice, so a single key means one call.
    6. Finalize: a classifiable answer is returned as is; anything else
       becomes the canonical unclassifiable result.

Calls are strictly sequential and at most two per complaint. The engine
holds no per-request state, so one instance serves concurrent requests.

Usage:
    engine = build_engine(settings)
    result = await engine.classify(description, image_url)
"""

import dataclasses
import time
from typing import Mapping, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from civic_triage.llm.base_client import BaseLLMClient
from civic_triage.llm.exceptions import LLMClientError
from civic_triage.llm.prompt_builder import PromptBuilder
from civic_triage.models.classification import ClassificationRequest, ClassificationResult
from civic_triage.monitoring.metrics import (
    classifications_total,
    input_short_circuits_total,
    provider_attempts_total,
    provider_fallbacks_total,
)
from civic_triage.orchestration.input_gate import InputGate
from civic_triage.orchestration.metadata import (
    AttemptOutcome,
    AttemptRecord,
    ClassificationState,
    ClassificationTrace,
)
from civic_triage.orchestration.selection import ProviderSelection
from civic_triage.validation.exceptions import ValidationError
from civic_triage.validation.pipeline import ResponsePipeline

logger = structlog.get_logger(__name__)

INVALID_INPUT = "invalid_input"
NO_PROVIDER_CONFIGURED = "no_provider_configured"


class ClassificationEngine:
    """
    Orchestrates provider attempts and produces an always-valid result.

    Attributes:
        clients: Provider name -> client
        selection: Immutable provider selection policy
        prompt_builder: Renders the classification prompt
        pipeline: Parses and normalizes provider answers
        input_gate: Local pre-checks
    """

    def __init__(
        self,
        clients: Mapping[str, BaseLLMClient],
        selection: ProviderSelection,
        prompt_builder: PromptBuilder,
        pipeline: Optional[ResponsePipeline] = None,
        input_gate: Optional[InputGate] = None,
    ):
        missing = [name for name in selection.configured if name not in clients]
        if missing:
            raise ValueError(f"no client registered for configured providers: {missing}")

        self.clients = dict(clients)
        self.selection = selection
        self.prompt_builder = prompt_builder
        self.pipeline = pipeline or ResponsePipeline()
        self.input_gate = input_gate or InputGate()

        logger.info(
            "ClassificationEngine initialized",
            preferred=selection.preferred,
            configured=sorted(selection.configured),
            primary=selection.primary,
            secondary=selection.secondary,
        )

    async def classify(
        self,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> ClassificationResult:
        """
        Classify one complaint. Never raises.

        Args:
            description: Complaint text
            image_url: URL of the uploaded complaint photo

        Returns:
            Fully populated, taxonomy-valid ClassificationResult
        """
        result, _ = await self.classify_with_trace(description, image_url)
        return result

    async def classify_with_trace(
        self,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> tuple[ClassificationResult, ClassificationTrace]:
        """
        Classify one complaint and return the audit trace alongside.

        Returns:
            Tuple of (result, trace)
        """
        start_time = time.time()
        states = [ClassificationState.NOT_STARTED]
        attempts: list[AttemptRecord] = []
        fallback_reasons: list[str] = []
        short_circuit_reason: Optional[str] = None

        try:
            states.append(ClassificationState.INPUT_CHECK)
            try:
                request = ClassificationRequest(description=description, image_url=image_url)
            except PydanticValidationError as e:
                logger.warning("Rejected malformed classification input", error_count=e.error_count())
                request = None
                short_circuit_reason = INVALID_INPUT
            else:
                verdict = self.input_gate.check(request)
                if not verdict.accepted:
                    short_circuit_reason = verdict.reason

            if short_circuit_reason is not None:
                input_short_circuits_total.labels(reason=short_circuit_reason).inc()
                logger.info(
                    "Input short-circuited to unclassifiable",
                    reason=short_circuit_reason,
                    description_length=len(description) if isinstance(description, str) else None,
                    has_image=bool(image_url),
                )
                result = self._finalize(None)
            else:
                result = await self._run_attempts(request, states, attempts, fallback_reasons)

        except Exception as e:
            # classify never raises
            logger.exception("Unexpected error in classification engine", error=str(e))
            result = ClassificationResult.unclassifiable()

        states.append(ClassificationState.DONE)
        final_provider = next((a.provider for a in reversed(attempts) if a.usable), None)
        trace = ClassificationTrace(
            states=tuple(states),
            attempts=tuple(attempts),
            fallback_reasons=tuple(fallback_reasons),
            short_circuit_reason=short_circuit_reason,
            final_provider=final_provider,
            total_latency_ms=int((time.time() - start_time) * 1000),
        )

        classifications_total.labels(
            category=result.category.name,
            classifiable=str(result.classifiable).lower(),
        ).inc()
        logger.info(
            "Classification complete",
            category=result.category.name,
            severity=result.severity.name,
            department=result.department.name,
            classifiable=result.classifiable,
            **trace.summary(),
        )
        return result, trace

    async def _run_attempts(
        self,
        request: ClassificationRequest,
        states: list[ClassificationState],
        attempts: list[AttemptRecord],
        fallback_reasons: list[str],
    ) -> ClassificationResult:
        selection = self.selection
        primary = selection.primary

        if primary is None:
            logger.warning(
                "No AI provider configured, using unclassifiable result",
                reason=NO_PROVIDER_CONFIGURED,
            )
            return self._finalize(None)

        # 2. Primary attempt
        states.append(ClassificationState.PRIMARY_ATTEMPT)
        record = await self._attempt(primary, request, ClassificationState.PRIMARY_ATTEMPT)

        # 3. Degenerate-success detection
        if record.usable and record.result.is_default:
            provider_attempts_total.labels(provider=primary, outcome="degenerate").inc()
            record = dataclasses.replace(record, outcome=AttemptOutcome.DEGENERATE, result=None)
            logger.warning(
                "Primary provider returned the all-defaults classification, treating as failure",
                provider=primary,
            )
        attempts.append(record)
        if record.usable:
            return self._finalize(record.result)

        # 4. Secondary attempt
        secondary = selection.secondary
        if selection.is_configured(secondary):
            self._log_fallback(primary, secondary, record, fallback_reasons)
            states.append(ClassificationState.SECONDARY_ATTEMPT)
            record = await self._attempt(secondary, request, ClassificationState.SECONDARY_ATTEMPT)
            attempts.append(record)
            if record.usable:
                return self._finalize(record.result)
        else:
            logger.info("Secondary provider not configured, skipping", provider=secondary)

        # 5. Retry the provider that has not been called yet
        last_failed = attempts[-1].provider
        retry = selection.retry_target(last_failed, tried={a.provider for a in attempts})
        if retry is not None and len(attempts) < 2:
            self._log_fallback(last_failed, retry, record, fallback_reasons)
            states.append(ClassificationState.PRIMARY_RETRY)
            record = await self._attempt(retry, request, ClassificationState.PRIMARY_RETRY)
            attempts.append(record)
            if record.usable:
                return self._finalize(record.result)

        logger.error(
            "All AI providers failed, using unclassifiable result",
            providers_tried=[a.provider for a in attempts],
            outcomes=[a.outcome.value for a in attempts],
        )
        return self._finalize(None)

    async def _attempt(
        self,
        provider: str,
        request: ClassificationRequest,
        state: ClassificationState,
    ) -> AttemptRecord:
        """
        One full pipeline run against one provider.

        Transport and validation failures come back as a failed record,
        never as an exception.
        """
        client = self.clients[provider]
        start_time = time.time()
        raw_content: Optional[str] = None

        logger.info("Calling AI provider", provider=provider, state=state.value)

        try:
            llm_request = self.prompt_builder.build_request(
                description=request.description,
                image_url=request.image_url,
                model=client.model_for(has_image=request.image_url is not None),
            )
            llm_response = await client.generate(llm_request)
            raw_content = llm_response.content
            logger.info("AI provider raw response", provider=provider, raw_response=raw_content)
            result = self.pipeline.process(llm_response)

        except LLMClientError as e:
            provider_attempts_total.labels(provider=provider, outcome="transport_error").inc()
            logger.warning(
                "AI provider call failed",
                provider=provider,
                state=state.value,
                error_type=type(e).__name__,
                error=e.message,
                details=e.details,
            )
            return AttemptRecord(
                provider=provider,
                state=state,
                outcome=AttemptOutcome.TRANSPORT_ERROR,
                latency_ms=int((time.time() - start_time) * 1000),
                error_type=type(e).__name__,
                error=e.message,
            )

        except ValidationError as e:
            provider_attempts_total.labels(provider=provider, outcome="invalid_response").inc()
            logger.warning(
                "AI provider returned unusable output",
                provider=provider,
                state=state.value,
                stage=e.stage,
                error_type=type(e).__name__,
                error=e.message,
                details=e.details,
            )
            return AttemptRecord(
                provider=provider,
                state=state,
                outcome=AttemptOutcome.INVALID_RESPONSE,
                latency_ms=int((time.time() - start_time) * 1000),
                error_type=type(e).__name__,
                error=e.message,
                raw_response=raw_content,
            )

        except Exception as e:
            # Failure before an answer arrived counts as a transport failure
            outcome = (
                AttemptOutcome.TRANSPORT_ERROR if raw_content is None
                else AttemptOutcome.INVALID_RESPONSE
            )
            provider_attempts_total.labels(provider=provider, outcome=outcome.value).inc()
            logger.exception(
                "Unexpected error during AI provider attempt",
                provider=provider,
                state=state.value,
                error_type=type(e).__name__,
                error=str(e),
            )
            return AttemptRecord(
                provider=provider,
                state=state,
                outcome=outcome,
                latency_ms=int((time.time() - start_time) * 1000),
                error_type=type(e).__name__,
                error=str(e),
                raw_response=raw_content,
            )

        provider_attempts_total.labels(provider=provider, outcome="success").inc()
        return AttemptRecord(
            provider=provider,
            state=state,
            outcome=AttemptOutcome.SUCCESS,
            latency_ms=int((time.time() - start_time) * 1000),
            result=result,
            raw_response=raw_content,
        )

    def _log_fallback(
        self,
        from_provider: str,
        to_provider: str,
        failed: AttemptRecord,
        fallback_reasons: list[str],
    ) -> None:
        reason = failed.outcome.value
        fallback_reasons.append(reason)
        provider_fallbacks_total.labels(reason=reason).inc()
        logger.warning(
            "Falling back to next AI provider",
            from_provider=from_provider,
            to_provider=to_provider,
            reason=reason,
            error_type=failed.error_type,
        )

    @staticmethod
    def _finalize(result: Optional[ClassificationResult]) -> ClassificationResult:
        if result is not None and result.classifiable:
            return result
        return ClassificationResult.unclassifiable()

    async def close(self) -> None:
        """Close every provider client."""
        for client in self.clients.values():
            await client.close()
