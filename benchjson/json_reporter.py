"""Reporter that writes benchmark results as a JSON document."""

from __future__ import annotations

import math
import sys
from datetime import datetime
from typing import TextIO

from .formatting import format_kv
from .model import (
    TOMBSTONE_VALUE,
    Context,
    Run,
    RunType,
    Scaling,
    StatisticUnit,
    big_o_string,
    time_unit_string,
)


def local_date_time_string() -> str:
    """Current local time as ``YYYY-MM-DDTHH:MM:SS+HH:MM``."""
    return datetime.now().astimezone().isoformat(timespec="seconds")


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class JSONReporter:
    """Writes a context block followed by a list of benchmark runs."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self._first_report = True

    def report_context(self, context: Context) -> bool:
        """Write the opening of the document and the context block."""
        out = self.out
        indent = " " * 4
        out.write("{\n")
        out.write('  "context": {\n')
        out.write(indent + format_kv("date", local_date_time_string()) + ",\n")
        out.write(indent + format_kv("host_name", context.sys_info.name) + ",\n")
        if context.executable_name:
            out.write(indent + format_kv("executable", context.executable_name) + ",\n")

        info = context.cpu_info
        out.write(indent + format_kv("num_cpus", int(info.num_cpus)) + ",\n")
        mhz = _round_half_away(info.cycles_per_second / 1000000.0)
        out.write(indent + format_kv("mhz_per_cpu", mhz) + ",\n")
        if info.scaling is not Scaling.UNKNOWN:
            enabled = info.scaling is Scaling.ENABLED
            out.write(indent + format_kv("cpu_scaling_enabled", enabled) + ",\n")

        out.write(indent + '"caches": [\n')
        cache_indent = " " * 8
        blocks = []
        for cache in info.caches:
            fields = [
                format_kv("type", cache.type),
                format_kv("level", int(cache.level)),
                format_kv("size", int(cache.size)),
                format_kv("num_sharing", int(cache.num_sharing)),
            ]
            body = ",\n".join(cache_indent + f for f in fields)
            blocks.append(f"      {{\n{body}\n      }}")
        for block in blocks:
            pass
        if blocks:
            out.write(",\n".join(blocks) + "\n")
        out.write(indent + "],\n")
        load = ",".join(f"{v:g}" for v in info.load_avg)
        out.write(indent + f'"load_avg": [{load}],\n')

        out.write(indent + format_kv("library_build_type", context.library_build_type))
        for key in sorted(context.global_context):
            out.write(",\n" + indent + format_kv(key, context.global_context[key]))
        out.write("\n")
        out.write("  },\n")
        out.write('  "benchmarks": [\n')
        return True

    def report_runs(self, reports: list[Run]) -> None:
        """Write a batch of runs, separated from earlier batches by commas."""
        if not reports:
            return
        out = self.out
        if not self._first_report:
            out.write(",\n")
        self._first_report = False
        for position, run in enumerate(reports):
            if position:
                out.write(",\n")
            out.write("    {\n")
            self.print_run_data(run)
            out.write("    }")

    def finalize(self) -> None:
        """Close the list of benchmarks and the top-level object."""
        self.out.write("\n  ]\n}\n")

    def print_run_data(self, run: Run) -> None:
        """Write the fields of one run."""
        aggregate = run.run_type is RunType.AGGREGATE
        items = [
            format_kv("name", run.benchmark_name()),
            format_kv("family_index", run.family_index),
            format_kv("per_family_instance_index", run.per_family_instance_index),
            format_kv("run_name", run.run_name),
            format_kv("run_type", run.run_type.value),
            format_kv("repetitions", run.repetitions),
        ]
        if not aggregate:
            items.append(format_kv("repetition_index", run.repetition_index))
        items.append(format_kv("threads", run.threads))
        if aggregate:
            items.append(format_kv("aggregate_name", run.aggregate_name))
            items.append(format_kv("aggregate_unit", run.aggregate_unit.value))
        if run.error_occurred:
            items.append(format_kv("error_occurred", True))
            items.append(format_kv("error_message", run.error_message))

        if not run.report_big_o and not run.report_rms:
            items.append(format_kv("iterations", run.iterations))
            if not aggregate or run.aggregate_unit is StatisticUnit.TIME:
                items.append(format_kv("real_time", float(run.adjusted_real_time())))
                items.append(format_kv("cpu_time", float(run.adjusted_cpu_time())))
            else:
                items.append(format_kv("real_time", float(run.real_accumulated_time)))
                items.append(format_kv("cpu_time", float(run.cpu_accumulated_time)))
            items.append(format_kv("time_unit", time_unit_string(run.time_unit)))
        elif run.report_big_o:
            items.append(format_kv("cpu_coefficient", float(run.adjusted_cpu_time())))
            items.append(format_kv("real_coefficient", float(run.adjusted_real_time())))
            items.append(format_kv("big_o", big_o_string(run.complexity)))
            items.append(format_kv("time_unit", time_unit_string(run.time_unit)))
        else:
            items.append(format_kv("rms", float(run.adjusted_cpu_time())))

        for name in sorted(run.counters):
            items.append(format_kv(name, float(run.counters[name])))

        memory = run.memory_result
        if memory is not None:
            items.append(format_kv("allocs_per_iter", float(run.allocs_per_iter)))
            items.append(format_kv("max_bytes_used", memory.max_bytes_used))
            for label, value in (
                ("total_allocated_bytes", memory.total_allocated_bytes),
                ("net_heap_growth", memory.net_heap_growth),
            ):
                if value != TOMBSTONE_VALUE:
                    items.append(format_kv(label, value))

        if run.report_label:
            items.append(format_kv("label", run.report_label))

        indent = " " * 6
        self.out.write(",\n".join(indent + item for item in items) + "\n")