#
# src/nestest/runner.py
#
"""
Recursive, strictly sequential execution of a registry.

Each level walks its nodes in order: cases are awaited one at a time with
their output intercepted, groups are recursed into with one extra level of
indentation, and failures bubble up as data to be re-qualified with the
enclosing group's name. Only the top level summarizes and raises.
"""

import asyncio
import inspect
from collections.abc import Iterator

import structlog
from attrs import field, frozen

from nestest.capture import active_sink, intercept
from nestest.config import HarnessConfig
from nestest.exceptions import CaseFailure, RunFailed
from nestest.registry import Case, Group, Registry, default_registry
from nestest.sinks import Channel, Sink, indent
from nestest.telemetry import StructLogger

log: StructLogger = structlog.get_logger("runner")

BANNER = "[ Test Runner ]"
PASS_MARK = "✓"
FAIL_MARK = "✗"


@frozen(slots=True)
class RunResult:
    """Failed qualified names, outermost group first, plus the number of cases visited."""
    failed: tuple[str, ...] = field(factory=tuple, converter=tuple)
    leaf_count: int = 0

    def __iter__(self) -> Iterator:
        # Unpacks as (failed, leaf_count).
        return iter((list(self.failed), self.leaf_count))

    @property
    def ok(self) -> bool:
        return not self.failed


class Runner:
    """Walks registries and reports case outcomes to a sink."""

    def __init__(self, config: HarnessConfig | None = None):
        self.config = config or HarnessConfig()

    async def run(
        self,
        registry: Registry | None = None,
        depth: int = 0,
        sink: Sink | None = None,
    ) -> RunResult:
        """
        Runs every node of `registry` (the default registry when None).

        `depth` is the recursion level; top-level callers leave it at 0.
        `sink` is the unindented base sink; when None, the active sink is used.

        Raises:
            RunFailed: at depth 0 when at least one case failed.
        """
        registry = default_registry if registry is None else registry
        base = sink if sink is not None else active_sink()
        out = indent(base, depth, self.config.indent_marker)

        if depth == 0:
            base.write(Channel.NORMAL, f"\n{BANNER}\n", style="bold blue")
            log.info("Run starting", nodes=len(registry))

        failed: list[str] = []
        leaf_count = 0

        # Snapshot so the walk is unaffected by anything appended meanwhile.
        for node in tuple(registry):
            if isinstance(node, Group):
                child = await self._run_group(node, depth, base, out)
                failed.extend(f"{node.name}{self.config.separator}{name}" for name in child.failed)
                leaf_count += child.leaf_count
            elif isinstance(node, Case):
                failure = await self._run_case(node, depth, out)
                if failure is not None:
                    failed.append(node.name)
                leaf_count += 1
            else:
                raise TypeError(f"Registry holds a {type(node).__name__}, expected a Case or Group")

        result = RunResult(failed, leaf_count)
        if depth == 0:
            self._summarize(result, base)
        return result

    async def _run_group(self, group: Group, depth: int, base: Sink, out: Sink) -> RunResult:
        out.write(Channel.NORMAL, f"v {group.name}", style="magenta")
        group_log = log.bind(group=group.name, depth=depth)
        group_log.debug("Entering group", nodes=len(group.children), emoji_key="group")
        try:
            child = await self.run(group.children, depth + 1, base)
        except Exception:
            # Nested levels never raise RunFailed, so this is a harness defect.
            group_log.error("Nested run raised; its results are discarded", exc_info=True)
            child = RunResult()
        out.write(Channel.NORMAL, f"^ {group.name}", style="magenta")
        group_log.debug("Leaving group", failed=len(child.failed), leaf_count=child.leaf_count)
        return child

    async def _run_case(self, case: Case, depth: int, out: Sink) -> CaseFailure | None:
        case_log = log.bind(case=case.name, depth=depth)
        case_log.debug("Running case")
        failure: CaseFailure | None = None
        with intercept(capture_stdio=self.config.capture_stdio) as captured:
            try:
                outcome = case.action()
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception as e:
                failure = CaseFailure(case.name, e)

        if failure is None:
            out.write(Channel.NORMAL, f"- {PASS_MARK} {case.name}", style="green")
            case_log.debug("Case passed", captured_lines=len(captured), emoji_key="pass")
        else:
            out.write(Channel.ERROR, f"- {FAIL_MARK} {case.name}", style="red")
            out.write(Channel.ERROR, failure.describe(self.config.show_traceback))
            case_log.debug(
                "Case failed", error=str(failure.error), captured_lines=len(captured), emoji_key="fail"
            )
        captured.replay(out)
        return failure

    def _summarize(self, result: RunResult, sink: Sink) -> None:
        if result.failed:
            sink.write(Channel.ERROR, f"\n{len(result.failed)}/{result.leaf_count} test(s) failed\n")
            for name in result.failed:
                sink.write(Channel.ERROR, f"- {name} failed", style="red")
            sink.write(Channel.NORMAL, "")
            log.info(
                "Run finished with failures", failed=len(result.failed), leaf_count=result.leaf_count, emoji_key="fail"
            )
            raise RunFailed(result)
        sink.write(Channel.NORMAL, f"\nAll {result.leaf_count} tests passed")
        log.info("Run finished", leaf_count=result.leaf_count, emoji_key="success")


async def run(
    registry: Registry | None = None,
    depth: int = 0,
    sink: Sink | None = None,
    config: HarnessConfig | None = None,
) -> RunResult:
    """Runs `registry` with a Runner built from `config`."""
    return await Runner(config).run(registry, depth, sink)


def run_sync(
    registry: Registry | None = None,
    sink: Sink | None = None,
    config: HarnessConfig | None = None,
) -> RunResult:
    """Blocking entry point: runs the top level in a fresh event loop."""
    return asyncio.run(run(registry, 0, sink, config))


# 🔼⚙️
