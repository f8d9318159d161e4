"""Rich renderables for the cipher traces."""
import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from cipherlab.classical.caesar import CaesarStep
from cipherlab.classical.playfair import Digraph, Matrix
from cipherlab.classical.rail_fence import RailFenceRoundTrace
from cipherlab.rsa.modexp import ModExpStep
from cipherlab.rsa.number_theory import EuclideanStep
from cipherlab.rsa.rsa_cipher import OperationResult, RsaParameters


def get_console() -> Console:
    return Console()


def configure_logging(verbose: bool) -> None:
    """Send cipherlab log records to the console through rich."""
    handler = RichHandler(show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s  %(message)s"))
    logger = logging.getLogger("cipherlab")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def params_table(params: RsaParameters) -> Panel:
    t = Table(show_header=False, show_edge=False, padding=(0, 2))
    t.add_column("Name", style="cyan", no_wrap=True)
    t.add_column("Value", style="green")
    t.add_row("p", str(params.p))
    t.add_row("q", str(params.q))
    t.add_row("n = p·q", str(params.n))
    t.add_row("φ(n) = (p-1)(q-1)", str(params.totient))
    t.add_row("e", str(params.e))
    t.add_row("d = e⁻¹ mod φ(n)", str(params.d))
    t.add_row("Public key", f"({params.e}, {params.n})")
    t.add_row("Private key", f"({params.d}, {params.n})")
    return Panel(t, title="RSA Parameters", padding=(1, 1))


def euclidean_table(steps: List[EuclideanStep]) -> Table:
    t = Table(title="Extended Euclidean Algorithm", show_lines=False)
    for name in ("q", "r1", "r2", "r", "t1", "t2", "t"):
        t.add_column(name, justify="right")
    for s in steps:
        t.add_row(*(str(v) for v in (s.q, s.r1, s.r2, s.r, s.t1, s.t2, s.t)))
    return t


def modexp_table(steps: List[ModExpStep], modulus: int, title: Optional[str] = None) -> Table:
    t = Table(title=title or "Square-and-Multiply")
    t.add_column("i", justify="right", style="dim")
    t.add_column("bit", justify="center")
    t.add_column("p", justify="right")
    t.add_column("p²", justify="right")
    t.add_column(f"p² mod {modulus}", justify="right")
    t.add_column("z = result·p", justify="right", style="yellow")
    t.add_column("result", justify="right", style="green")
    for s in steps:
        t.add_row(
            str(s.bit_index),
            str(s.bit),
            str(s.p),
            str(s.p_squared),
            str(s.p_mod),
            "" if s.multiply_product is None else str(s.multiply_product),
            str(s.running_result),
        )
    return t


def operation_table(label: str, result: OperationResult, modulus: int) -> Table:
    title = f"{label}: {result.input_value} → {result.output_value}"
    if result.intermediate_value is not None:
        title += f" (intermediate {result.intermediate_value})"
    return modexp_table(result.steps, modulus, title=title)


def caesar_table(steps: List[CaesarStep]) -> Table:
    t = Table(title="Caesar Steps")
    t.add_column("Letter", justify="center", style="cyan")
    t.add_column("Value", justify="right")
    t.add_column("Computation")
    t.add_column("Result", justify="right")
    t.add_column("Char", justify="center", style="green")
    for s in steps:
        t.add_row(s.input_char, f"{s.numeric_value:02d}", s.formula, str(s.result_value), s.result_char)
    return t


def matrix_table(matrix: Matrix) -> Panel:
    grid = Table.grid(padding=(0, 2))
    for _ in matrix[0]:
        grid.add_column(justify="center")
    for row in matrix:
        grid.add_row(*(ch.upper() for ch in row))
    return Panel(grid, title="Key Square", expand=False, padding=(1, 2))


def digraph_table(digraphs: List[Digraph]) -> Table:
    t = Table(title="Digraphs")
    t.add_column("#", justify="right", style="dim")
    t.add_column("Plaintext", justify="center", style="cyan")
    t.add_column("Ciphertext", justify="center", style="green")
    for i, d in enumerate(digraphs, start=1):
        t.add_row(str(i), d.plaintext_pair.upper(), d.ciphertext_pair.upper())
    return t


def rail_fence_table(trace: RailFenceRoundTrace, round_number: int) -> Table:
    t = Table(title=f"Round {round_number}: {trace.text}")
    for header in trace.headers:
        t.add_column(f"{header.display_char}\n({header.order})", justify="center")
    for row in trace.table:
        t.add_row(*row)
    return t
