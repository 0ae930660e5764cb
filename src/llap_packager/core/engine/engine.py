# src/llap_packager/core/engine/engine.py
"""
Engine de execução do pipeline de empacotamento.

O Engine executa uma lista ordenada de Steps, cada um marcado como
`mandatory` ou `optional`:

- falha de Step mandatory → a run é interrompida imediatamente
  (nenhum Step posterior é executado);
- falha de Step optional → registrada como warning; a run continua.

Compatibilidade com StepResult frozen dataclass:
- O Engine **não** muta instâncias de StepResult in-place.
- Qualquer enriquecimento (warnings/policy) é feito via
  criação de uma **nova** instância (dataclasses.replace).

Guardrails:
- Exceções são convertidas em PackagerErrorPayload (serializável e acionável)
  e persistidas em StepResult.payload["error"].
- A exceção original de um Step mandatory é preservada em `RunResult.fatal`
  para ser re-levantada na fronteira do assembly.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence

from llap_packager.core.errors import (
    EXCEPTION_CODES,
    PackagerErrorPayload,
    engine_execution_error,
)
from llap_packager.core.exceptions import PackagerException
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.step import Step
from llap_packager.core.pipeline.types import (
    StepKind,
    StepPolicy,
    StepResult,
    StepStatus,
)


@dataclass(frozen=True)
class RunResult:
    """Resultado agregado de uma execução do pipeline."""

    steps: Dict[str, StepResult] = field(default_factory=dict)
    aborted_by: Optional[str] = None
    fatal: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return self.aborted_by is None

    def warnings(self) -> List[str]:
        out: List[str] = []
        for result in self.steps.values():
            out.extend(result.warnings)
        return out

    def raise_for_failure(self) -> None:
        if self.ok:
            return
        if self.fatal is not None:
            raise self.fatal
        failed = self.steps[self.aborted_by]  # type: ignore[index]
        error = failed.payload.get("error") or {}
        raise PackagerException(
            failed.summary,
            details=dict(error.get("details") or {}),
            hint=error.get("hint"),
        )


class Engine:
    """Engine canônico do packager (executor ordenado mandatory/optional)."""

    def __init__(self, *, steps: Sequence[Step], ctx: PackagingContext):
        self.steps: List[Step] = list(steps)
        self.ctx: PackagingContext = ctx

    # ------------------------------------------------------------------
    # Guardrails: exceção -> PackagerErrorPayload
    # ------------------------------------------------------------------

    def _exception_to_error(self, step_id: str, exc: Exception) -> PackagerErrorPayload:
        """Converte exceções em PackagerErrorPayload (serializável, acionável).

        Regras:
        - PackagerException: já vem com message/details/hint; o código estável
          é derivado do nome da classe.
        - Outras exceções: encapsular como ENGINE_EXECUTION_ERROR sem expor stack trace.
        """
        if isinstance(exc, PackagerException):
            name = exc.__class__.__name__
            return PackagerErrorPayload(
                type=EXCEPTION_CODES.get(name, name),
                message=str(exc) or "Erro de empacotamento",
                details=dict(exc.details),
                hint=exc.hint,
            )

        return engine_execution_error(
            step=step_id,
            exc_type=exc.__class__.__name__,
            exc_message=str(exc) or None,
        )

    # ------------------------------------------------------------------
    # Rastreamento: helpers para enriquecer StepResult
    # ------------------------------------------------------------------
    def _ctx_warnings_for(self, step_id: str) -> List[str]:
        return list(self.ctx.warnings.get(step_id, []) or [])

    def _enrich_step_result(self, *, step: Step, result: StepResult) -> StepResult:
        """Retorna uma NOVA instância StepResult enriquecida (StepResult é frozen)."""
        merged_w: List[str] = []
        seen = set()
        for msg in list(result.warnings or []) + self._ctx_warnings_for(step.id):
            if msg not in seen:
                merged_w.append(msg)
                seen.add(msg)

        return replace(
            result,
            step_id=step.id,
            policy=self._policy(step),
            warnings=merged_w,
        )

    def _policy(self, step: Step) -> StepPolicy:
        return getattr(step, "policy", StepPolicy.MANDATORY) or StepPolicy.MANDATORY

    def _mk_failed(self, *, step: Step, error: PackagerErrorPayload) -> StepResult:
        kind = getattr(step, "kind", StepKind.PREFLIGHT) or StepKind.PREFLIGHT
        r = StepResult(
            step_id=step.id,
            kind=kind,
            status=StepStatus.FAILED,
            summary=error.message,
            payload={"error": error.to_dict()},
        )
        return self._enrich_step_result(step=step, result=r)

    def run(self) -> RunResult:
        results: Dict[str, StepResult] = {}
        aborted_by: Optional[str] = None
        fatal: Optional[BaseException] = None

        for step in self.steps:
            sid = step.id
            policy = self._policy(step)
            self.ctx.log(step_id=sid, level="DEBUG", message="step started", policy=policy.value)

            try:
                step_result = step.run(self.ctx)
                if not isinstance(step_result, StepResult):
                    raise TypeError("Step.run(ctx) must return StepResult")
                result = self._enrich_step_result(step=step, result=step_result)
                error_exc: Optional[Exception] = None

            except Exception as e:
                error_exc = e
                result = self._mk_failed(step=step, error=self._exception_to_error(sid, e))

            results[sid] = result

            if result.status != StepStatus.FAILED:
                self.ctx.log(step_id=sid, level="INFO", message=result.summary, status=result.status.value)
                continue

            if policy is StepPolicy.OPTIONAL:
                # best-effort: registra e segue
                message = f"{sid}: {result.summary}; continuing"
                self.ctx.add_warning(step_id=sid, message=message)
                results[sid] = replace(result, warnings=list(result.warnings) + [message])
                continue

            self.ctx.log(step_id=sid, level="ERROR", message=result.summary, status=result.status.value)
            aborted_by = sid
            fatal = error_exc
            break

        return RunResult(steps=results, aborted_by=aborted_by, fatal=fatal)
