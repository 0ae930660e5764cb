"""Step canônico: java.home (v1).

Ordem de resolução:
    1. caminho explícito informado pelo operador
    2. JAVA_HOME do ambiente, comparado com a instalação do runtime
       (divergência → warning; o valor do ambiente é mantido)
    3. instalação do runtime
    4. nenhum → JavaHomeUnresolved (fatal)

Publica o artifact `java.home` consumido pelo manifest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from llap_packager.core.exceptions import JavaHomeUnresolved
from llap_packager.core.pipeline.context import PackagingContext
from llap_packager.core.pipeline.step import Step
from llap_packager.core.pipeline.types import StepKind, StepPolicy, StepResult, StepStatus
from llap_packager.core.traceability.manifest import JAVA_HOME


@dataclass
class JavaHomeStep(Step):
    id: str = "java.home"
    kind: StepKind = StepKind.ENVIRONMENT
    policy: StepPolicy = StepPolicy.MANDATORY

    def run(self, ctx: PackagingContext) -> StepResult:
        warnings: List[str] = []
        origin = "option"
        java_home = ctx.options.java_home

        if not java_home:
            probe = ctx.env.java
            env_home = probe.env_java_home()
            runtime_home = probe.runtime_java_home()
            if env_home:
                java_home, origin = env_home, "JAVA_HOME"
                if runtime_home and env_home != runtime_home:
                    message = (
                        f"Java versions might not match : JAVA_HOME=[{env_home}],"
                        f"process jre=[{runtime_home}]"
                    )
                    ctx.add_warning(step_id=self.id, message=message)
                    warnings.append(message)
            elif runtime_home:
                java_home, origin = runtime_home, "runtime"

        if not java_home:
            raise JavaHomeUnresolved(
                "Unable to determine the Java installation for the daemon",
                hint="Informe --java-home ou defina JAVA_HOME.",
            )

        ctx.set_artifact(JAVA_HOME, java_home)
        return StepResult(
            step_id=self.id,
            kind=self.kind,
            status=StepStatus.SUCCESS,
            summary=f"java home resolved from {origin}",
            warnings=warnings,
            artifacts={JAVA_HOME: java_home},
            payload={"origin": origin},
        )
