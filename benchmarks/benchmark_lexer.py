"""Benchmark nashlex tokenization throughput.

Lexes a generated nash corpus several times and reports tokens per second.

Run with:
    uv run python benchmarks/benchmark_lexer.py
"""

import statistics
import time

from nashlex import tokenize

SNIPPET = """\
# build the toolchain
import io

fn build(target) {
    cd $target
    echo "building " + $target + "\\n"
    rfork upn {
        make -j4 all >[2=1] | tee /tmp/build.log
    }
    status <= cat /tmp/status
    if $status == "0" {
        return "ok"
    } else {
        return "failed: " + $status
    }
}

for t in (core net fs) {
    result <= build($t)
    setenv PATH = $PATH + ":/opt/" + $t + "/bin"
}
"""


def build_corpus(copies: int) -> str:
    return SNIPPET * copies


def benchmark(source: str, iterations: int = 10) -> tuple[int, list[float]]:
    """Tokenize source repeatedly.

    Returns:
        (token count, per-iteration times in seconds)
    """
    count = len(tokenize(source))
    times: list[float] = []
    for _ in range(iterations):
        start = time.perf_counter()
        tokenize(source)
        times.append(time.perf_counter() - start)
    return count, times


def main() -> None:
    print("=" * 60)
    print("nashlex tokenize benchmark")
    print("=" * 60)

    for copies in (10, 100, 1000):
        source = build_corpus(copies)
        count, times = benchmark(source)
        median = statistics.median(times)
        print(
            f"{len(source):>9,} chars  {count:>8,} tokens  "
            f"{median * 1000:>8.2f} ms  {count / median:>12,.0f} tokens/s"
        )


if __name__ == "__main__":
    main()
