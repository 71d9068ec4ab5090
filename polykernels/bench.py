"""Registry of kernels and a command that times them."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from polykernels import blas2, blas3, datamining, matmul, matvec
from polykernels.common import NB_TESTS, Dataset, median


@dataclass(frozen=True)
class Benchmark:
    """A kernel together with its input generator and problem sizes."""

    name: str
    sizes: Mapping[Dataset, object]
    setup: Callable
    kernel: Callable

    def _inputs(self, dataset) -> tuple:
        sizes = self.sizes[_as_dataset(dataset)]
        if not isinstance(sizes, tuple):
            sizes = (sizes,)
        inputs = self.setup(*sizes)
        if not isinstance(inputs, tuple):
            inputs = (inputs,)
        return inputs

    def run(self, dataset):
        """Build the inputs for ``dataset`` and return the kernel's result."""
        return self.kernel(*self._inputs(dataset))


def _as_dataset(dataset) -> Dataset:
    if isinstance(dataset, Dataset):
        return dataset
    return Dataset(str(dataset).lower())


_BENCHMARKS = {
    bench.name: bench
    for bench in (
        Benchmark("correlation", datamining.CORRELATION_SIZES, datamining.init_correlation, datamining.correlation),
        Benchmark("covariance", datamining.COVARIANCE_SIZES, datamining.init_covariance, datamining.covariance),
        Benchmark("gemm", blas3.GEMM_SIZES, blas3.init_gemm, blas3.gemm),
        Benchmark("gemver", blas2.GEMVER_SIZES, blas2.init_gemver, blas2.gemver),
        Benchmark("gesummv", blas2.GESUMMV_SIZES, blas2.init_gesummv, blas2.gesummv),
        Benchmark("symm", blas3.SYMM_SIZES, blas3.init_symm, blas3.symm),
        Benchmark("syr2k", blas3.SYR2K_SIZES, blas3.init_syr2k, blas3.syr2k),
        Benchmark("syrk", blas3.SYRK_SIZES, blas3.init_syrk, blas3.syrk),
        Benchmark("trmm", blas3.TRMM_SIZES, blas3.init_trmm, blas3.trmm),
        Benchmark("2mm", matmul.TWO_MM_SIZES, matmul.init_2mm, matmul.two_mm),
        Benchmark("3mm", matmul.THREE_MM_SIZES, matmul.init_3mm, matmul.three_mm),
        Benchmark("atax", matvec.ATAX_SIZES, matvec.init_atax, matvec.atax),
        Benchmark("bicg", matvec.BICG_SIZES, matvec.init_bicg, matvec.bicg),
        Benchmark("doitgen", matmul.DOITGEN_SIZES, matmul.init_doitgen, matmul.doitgen),
        Benchmark("mvt", matvec.MVT_SIZES, matvec.init_mvt, matvec.mvt),
    )
}


def list_benchmarks() -> list[str]:
    """Names of every registered benchmark, in registration order."""
    return list(_BENCHMARKS)


def get_benchmark(name) -> Benchmark:
    """Look up a benchmark by name; raises KeyError if unknown."""
    try:
        return _BENCHMARKS[name]
    except KeyError:
        raise KeyError(f"unknown benchmark: {name!r}") from None


def run_benchmark(name, dataset=Dataset.MINI, repeats=NB_TESTS) -> float:
    """Time ``repeats`` runs of a kernel and return the median in milliseconds.

    Input generation is not included in the timings.
    """
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    bench = get_benchmark(name)
    dataset = _as_dataset(dataset)
    durations = []
    for _ in range(repeats):
        inputs = bench._inputs(dataset)
        start = time.perf_counter()
        bench.kernel(*inputs)
        durations.append((time.perf_counter() - start) * 1000.0)
    return median(durations)


def main(argv=None) -> int:
    """Time the chosen kernels and print the median run time of each."""
    parser = argparse.ArgumentParser(prog="polykernels", description="Time linear-algebra kernels.")
    parser.add_argument("benchmarks", nargs="*", help="kernels to run (default: all)")
    parser.add_argument(
        "--dataset",
        choices=[d.value for d in Dataset],
        default=Dataset.MINI.value,
        help="problem size",
    )
    parser.add_argument("--repeats", type=int, default=NB_TESTS, help="runs per kernel")
    args = parser.parse_args(argv)

    names = args.benchmarks or list_benchmarks()
    unknown = [name for name in names if name not in _BENCHMARKS]
    if unknown:
        parser.error(f"unknown benchmark(s): {', '.join(unknown)}")
    if args.repeats < 1:
        parser.error("--repeats must be at least 1")

    for name in names:
        elapsed = run_benchmark(name, args.dataset, args.repeats)
        print(f"{name}\t{elapsed:.3f} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())