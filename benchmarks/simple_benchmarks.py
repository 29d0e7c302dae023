from timeit import timeit

from rtlisp.interpreter import Interpreter
from rtlisp.evaluation.analyzer import analyze, evaluate
from rtlisp.reader.parser import read_one


def time_reanalyze(code: str, rounds: int) -> float:
    """Time evaluate(): every round analyzes the expression again before running it."""
    itp = Interpreter()
    expr = read_one(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


def time_analyze_once(code: str, rounds: int) -> float:
    """Time execution only: analyze once, then repeatedly run the same node."""
    itp = Interpreter()
    node = analyze(read_one(code))
    # Warmup once
    node(itp.env)
    # Timed: only execution
    return timeit(lambda: node(itp.env), number=rounds)


CASES = [
    ("arithmetic", "(* (+ 3 4) (+ 5 6))", 20_000),
    ("reversed arithmetic", "$((6 5 +) (4 3 +) *)", 20_000),
    ("closure call", "((fun (x y) (+ x y)) 1 2)", 20_000),
    ("fib_rec", "(fib_rec 15)", 20),
    ("fib_it", "(fib_it 30)", 2_000),
    ("Y triangular", "((Y tri) 50)", 500),
    ("church", "(church (inc (inc (inc zero_))))", 5_000),
]


def main() -> None:
    print(f"{'case':<22}{'re-analyze (s)':>16}{'analyze once (s)':>18}{'speedup':>10}")
    for name, code, rounds in CASES:
        t_re = time_reanalyze(code, rounds)
        t_once = time_analyze_once(code, rounds)
        speedup = t_re / t_once if t_once else float("inf")
        print(f"{name:<22}{t_re:>16.4f}{t_once:>18.4f}{speedup:>9.2f}x")


if __name__ == "__main__":
    main()
