from importlib import import_module
from pathlib import Path

from .SortingAlgorithm import SortingAlgorithm


class UnknownAlgorithmError(KeyError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"Unknown sorting algorithm: {tag!r}")
        self.tag = tag


sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    if file.stem.startswith("_"):
        continue
    module = import_module(f".impl.{file.stem}", package=__package__)
    sorting_algorithms.extend(module.algorithms)

labels: dict[str, str] = {algorithm.tag: algorithm.name for algorithm in sorting_algorithms}
_by_tag: dict[str, SortingAlgorithm] = {algorithm.tag: algorithm for algorithm in sorting_algorithms}


def get_algorithm(tag: str) -> SortingAlgorithm:
    try:
        return _by_tag[tag]
    except KeyError:
        raise UnknownAlgorithmError(tag) from None
