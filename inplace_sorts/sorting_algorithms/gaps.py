"""Shellsort gap sequences.

Every generator takes the length `n` of the range being sorted and yields
its gaps in increasing order, each strictly less than `n`. When `n > 1`
the first gap is 1, so the last pass of shellsort is a plain insertion
sort. Nothing is yielded for `n <= 1`.
"""
from collections.abc import Callable, Iterator
from math import ceil

NINE_FOURTHS = 2.25

# Ciura 2001, https://oeis.org/A102549. No formula is known.
CIURA_GAPS = (1, 4, 10, 23, 57, 132, 301, 701, 1750)

GapGenerator = Callable[[int], Iterator[int]]


def hibbard(n: int) -> Iterator[int]:
    "2**k - 1, Hibbard 1963."
    k = 1
    while (g := (1 << k) - 1) < n:
        yield g
        k += 1


def three_smooth(n: int) -> Iterator[int]:
    """Numbers of the form 2**a * 3**b, Pratt 1971.

    Generated in order by merging the streams of doubled and tripled
    earlier terms (Dijkstra's solution to the Hamming problem).
    """
    aux = [1]
    two_pos = three_pos = 0
    while aux[-1] < n:
        yield aux[-1]
        two_multiple = aux[two_pos] * 2
        three_multiple = aux[three_pos] * 3
        aux.append(min(two_multiple, three_multiple))
        if two_multiple <= three_multiple:
            two_pos += 1
        if three_multiple <= two_multiple:
            three_pos += 1


def sedgewick(n: int) -> Iterator[int]:
    "9*4**i - 9*2**i + 1 interleaved with 4**i - 3*2**i + 1, Sedgewick 1986."
    i, j = 0, 2
    while True:
        even = 9 * (1 << 2 * i) - 9 * (1 << i) + 1
        odd = (1 << 2 * j) - 3 * (1 << j) + 1
        g = min(even, odd)
        if g >= n:
            return
        yield g
        if even <= odd:
            i += 1
        if odd <= even:
            j += 1


def sedgewick_1982(n: int) -> Iterator[int]:
    "1 followed by 4**(i+1) + 3*2**i + 1, https://oeis.org/A036562."
    if n <= 1:
        return
    yield 1
    i = 0
    while (g := (1 << 2 * (i + 1)) + 3 * (1 << i) + 1) < n:
        yield g
        i += 1


def tokuda(n: int) -> Iterator[int]:
    "ceil(h) with h <- 2.25*h + 1, Tokuda 1992, https://oeis.org/A108870."
    h = 1.0
    while (g := ceil(h)) < n:
        yield g
        h = h * NINE_FOURTHS + 1.0


def quasi_ciura(n: int) -> Iterator[int]:
    "Ciura's terms, extended by repeatedly multiplying by 2.25."
    g = 0
    for g in CIURA_GAPS:
        if g >= n:
            return
        yield g
    while (g := int(g * NINE_FOURTHS)) < n:
        yield g


gap_generators: dict[str, GapGenerator] = {
    "hibbard": hibbard,
    "3smooth": three_smooth,
    "sedgewick": sedgewick,
    "sedgewick_1982": sedgewick_1982,
    "tokuda": tokuda,
    "quasi_ciura": quasi_ciura,
}
