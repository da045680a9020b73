from importlib import import_module
from pathlib import Path

from .SortingAlgorithm import SortingAlgorithm

sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    module = import_module(f".impl.{file.stem}", package=__package__)
    sorting_algorithms.append(module.algorithm)
