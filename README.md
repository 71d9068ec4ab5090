# polykernels

Classic polyhedral benchmark kernels written with NumPy, each with a
generator for its standard deterministic inputs, plus a small command that
times them.

## Kernels

| Module | Kernels |
| --- | --- |
| `polykernels.datamining` | `correlation`, `covariance` |
| `polykernels.blas3` | `gemm`, `symm`, `syr2k`, `syrk`, `trmm` |
| `polykernels.blas2` | `gemver`, `gesummv` |
| `polykernels.matvec` | `atax`, `bicg`, `mvt` |
| `polykernels.matmul` | `two_mm` (2mm), `three_mm` (3mm), `doitgen` |

Every kernel has a matching `init_*` function (`init_gemm`, `init_correlation`,
`init_2mm`, ...) that builds the input arrays the benchmark is defined with.
Each module also holds the problem sizes for every `Dataset` in a mapping such
as `GEMM_SIZES` or `CORRELATION_SIZES`.

The kernels take array-like inputs, check their shapes (raising `ValueError`
on a mismatch) and return new arrays; the inputs are left unchanged. Scalar
parameters default to `alpha = 1.5` and `beta = 1.2`, and `correlation` to
`eps = 0.1`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
polykernels [BENCHMARK ...] [--dataset {mini,small,medium,large,xlarge}] [--repeats N]
```

With no benchmark names every kernel is run. `--dataset` picks the problem
size (default `mini`) and `--repeats` the number of timed runs per kernel
(default 10). For each kernel one line is printed: its name and the median run
time in milliseconds. Input generation is not counted in the timings.

```
polykernels gemm atax --dataset small --repeats 5
```

## Library use

```python
from polykernels.blas3 import init_gemm, gemm
from polykernels.datamining import init_covariance, covariance
from polykernels.bench import get_benchmark, list_benchmarks, run_benchmark
from polykernels.common import Dataset, compare_buffers_approximately

# C_out = alpha * A B + beta * C
a, b, c = init_gemm(20, 25, 30)
result = gemm(a, b, c, 1.5, 1.2)

data = init_covariance(28, 32)
cov = covariance(data)

print(list_benchmarks())
median_ms = run_benchmark("gemm", Dataset.SMALL, 5)
a_hat, x, w = get_benchmark("gemver").run("mini")

compare_buffers_approximately("covariance", cov, cov, 0.0001)
```

`polykernels.bench`:

- `list_benchmarks()` returns the registered benchmark names.
- `get_benchmark(name)` returns the `Benchmark` for a name, raising `KeyError`
  for an unknown one.
- `Benchmark.run(dataset)` builds the inputs for a dataset and returns the
  kernel's result.
- `run_benchmark(name, dataset, repeats)` returns the median run time in
  milliseconds; `dataset` may be a `Dataset` or its name.

`polykernels.common`:

- `Dataset`: the problem-size classes `MINI`, `SMALL`, `MEDIUM`, `LARGE`,
  `XLARGE`.
- `compare_buffers_approximately(test, result, expected, threshold)` returns a
  success message, or raises `BufferMismatchError` on a shape mismatch or at the
  first element that differs by more than `threshold` (default 0.1). The error
  carries `test`, `index`, `expected` and `got`.
- `transpose(buf)` reverses the axis order of an array without copying data.
- `median(durations)` returns the median of a list of timings, raising
  `ValueError` when it is empty.

## What it does not do

The package holds only these reference kernels. It has no optimised or
generated variants to time against them, so the command reports one timing per
kernel and does not check results between implementations. Timings are printed
to standard output only; nothing is written to a file.