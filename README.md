# benchjson

benchjson writes benchmark results as a JSON report. A report has a
`context` block that describes the machine, followed by a `benchmarks` list
with one object for each run.

## What goes into a report

- Context: the date (local time, `YYYY-MM-DDTHH:MM:SS+HH:MM`), host name,
  executable (only when `Context.executable_name` is set), CPU count, clock
  speed in MHz, CPU frequency scaling (left out when it is
  `Scaling.UNKNOWN`), CPU caches, load average, library build type and any
  extra key/value pairs from `Context.global_context`, sorted by key.
- Iteration runs: the name, family and instance indices, repetitions,
  repetition index, threads, iterations, real and CPU time per iteration,
  and the time unit.
- Aggregate runs, such as mean, median and stddev. Each one carries its
  aggregate name and its unit, `StatisticUnit.TIME` or
  `StatisticUnit.PERCENTAGE`. Percentage aggregates are written unscaled.
- Complexity fits: with `report_big_o` the CPU and real coefficients, the
  Big-O name and the time unit; with `report_rms` the RMS value.
- User counters (sorted by name), memory statistics from `MemoryResult`,
  error information and labels. Memory statistics still holding
  `TOMBSTONE_VALUE` are left out.

Floating-point values are written in scientific notation with 17
significant digits. NaN and infinity are written as `NaN`, `Infinity` and
`-Infinity`.

## Installation

```
pip install benchjson
```

Python 3.10 or later is required. The package has no runtime dependencies.

## Usage

```python
import io

from benchjson.json_reporter import JSONReporter
from benchjson.model import (
    CPUInfo,
    Context,
    Run,
    RunType,
    SystemInfo,
    TimeUnit,
)

out = io.StringIO()
reporter = JSONReporter(out)

context = Context(
    sys_info=SystemInfo(name="build-host"),
    cpu_info=CPUInfo(num_cpus=8, cycles_per_second=3.0e9),
)
reporter.report_context(context)

run = Run(
    run_name="BM_basic",
    run_type=RunType.ITERATION,
    iterations=1000,
    real_accumulated_time=0.002,
    cpu_accumulated_time=0.002,
    time_unit=TimeUnit.NANOSECOND,
)
reporter.report_runs([run])
reporter.finalize()

print(out.getvalue())
```

`JSONReporter()` without an argument writes to standard output.
`report_runs` can be called several times; batches are joined with commas.
The output is valid JSON as long as every number is finite. Parse it with
`json.loads`.

## Helpers

The `benchjson.formatting` module has these helpers:

- `str_escape` escapes quotes, backslashes and the control characters
  `\b`, `\f`, `\n`, `\r` and `\t`.
- `format_double` formats a float the way the report writes it.
- `format_kv` renders one `"key": value` pair for a string, bool, int or
  float, and raises `TypeError` for anything else.

The `benchjson.model` module has these helpers:

- `time_unit_string` gives the short name of a time unit: `ns`, `us`, `ms`
  or `s`.
- `big_o_string` gives the short name of a complexity class, such as `N`,
  `NlgN` or `f(N)`.
- `Run.benchmark_name`, `Run.adjusted_real_time` and
  `Run.adjusted_cpu_time` give a run's reported name and its times per
  iteration in the run's time unit.

## What it does not do

benchjson only writes reports. It does not run or time benchmarks, compute
aggregates or complexity fits, or detect CPU, cache or load information:
the caller fills in `Context` and `Run` with those values. There is no
command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```