from importlib import import_module
from pathlib import Path

from .CmpAlgorithm import CmpAlgorithm

cmp_algorithms: list[CmpAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    module = import_module(f".impl.{file.stem}", package=__package__)
    cmp_algorithms.append(module.algorithm)
