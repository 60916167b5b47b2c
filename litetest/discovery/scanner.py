"""Target scanner - discovers test units in a package tree.

Walks a directory (package) or a single module under the source root,
imports each module and collects marked, runnable test methods.
Modules that fail to import are logged and skipped so one broken file
never blocks discovery of the rest of the tree.
"""

import importlib
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Iterator, Optional, Union

from ..markers import get_test_marker, is_test_class
from ..model import TestUnit
from .paths import clean_path, dotted_to_path, join_dotted

logger = logging.getLogger(__name__)

# Classes whose name contains this are framework internals and never scanned.
RESERVED_NAME_MARKER = "Lite"

MODULE_SUFFIX = ".py"


class TargetScanner:
    """Discovers test units below a source root."""

    def __init__(self, src_root: Union[str, Path]):
        """Initialize scanner.

        Args:
            src_root: Directory that dotted targets are relative to. It is
                added to ``sys.path`` so the modules below it import.
        """
        self.src_root = Path(src_root).resolve()
        self._activate()

    def enumerate(
        self,
        target: str = "",
        recurse: bool = False,
        require_type_marker: bool = True,
    ) -> list[TestUnit]:
        """Discover test units for a package, module or class target.

        Args:
            target: Dot- or slash-separated target relative to the source root.
                "" scans the source root itself.
            recurse: Descend into sub-packages.
            require_type_marker: Only scan classes decorated with ``lite_class``.

        Returns:
            Discovered units in traversal order.
        """
        self._activate()
        dotted = clean_path(target)
        if target.endswith(MODULE_SUFFIX) and not dotted_to_path(self.src_root, dotted).is_dir():
            dotted = clean_path(target[: -len(MODULE_SUFFIX)])
        units: list[TestUnit] = []

        path = dotted_to_path(self.src_root, dotted)
        if path.is_dir():
            self._scan_dir(path, dotted, recurse, require_type_marker, units)
        elif dotted and self._is_module(dotted):
            self._scan_module(dotted, None, require_type_marker, units)
        elif "." in dotted and self._is_module(dotted.rsplit(".", 1)[0]):
            module_name, class_name = dotted.rsplit(".", 1)
            self._scan_module(module_name, class_name, require_type_marker, units)
        else:
            logger.warning("Target not found: %s (looked in %s)", dotted or ".", path)

        return units

    def _scan_dir(
        self,
        directory: Path,
        dotted: str,
        recurse: bool,
        require_type_marker: bool,
        units: list[TestUnit],
    ) -> None:
        for member in sorted(directory.iterdir(), key=lambda p: p.name):
            if _is_ignored(member):
                continue
            if member.is_dir():
                if recurse:
                    self._scan_dir(
                        member, join_dotted(dotted, member.name),
                        recurse, require_type_marker, units,
                    )
            elif member.suffix == MODULE_SUFFIX:
                self._scan_module(
                    join_dotted(dotted, member.stem), None, require_type_marker, units
                )

    def _scan_module(
        self,
        module_name: str,
        class_name: Optional[str],
        require_type_marker: bool,
        units: list[TestUnit],
    ) -> None:
        module = self._load(module_name)
        if module is None:
            return

        for cls in _module_classes(module):
            if class_name is not None and cls.__name__ != class_name:
                continue
            if not _is_candidate(cls, require_type_marker):
                continue
            units.extend(_scan_class(cls))

    def _activate(self) -> None:
        """Put the source root first on ``sys.path``, once."""
        root = str(self.src_root)
        if sys.path and sys.path[0] == root:
            return
        if root in sys.path:
            sys.path.remove(root)
        sys.path.insert(0, root)

    def _load(self, module_name: str) -> Optional[ModuleType]:
        self._evict_foreign(module_name.split(".", 1)[0])
        try:
            return importlib.import_module(module_name)
        except Exception as e:
            logger.warning(
                "Skipping %s: failed to load (%s: %s)",
                module_name, type(e).__name__, e,
            )
            return None

    def _evict_foreign(self, package: str) -> None:
        """Drop a cached top-level package that was imported from another root.

        Source roots may hold packages with the same dotted name; modules
        below this scanner's root always win.
        """
        cached = sys.modules.get(package)
        if cached is None or self._owns(cached):
            return
        if not _module_locations(cached):
            return

        logger.info("Reloading %s from %s", package, self.src_root)
        for name in [n for n in sys.modules if n == package or n.startswith(package + ".")]:
            del sys.modules[name]
        importlib.invalidate_caches()

    def _owns(self, module: ModuleType) -> bool:
        return any(
            location == self.src_root or self.src_root in location.parents
            for location in _module_locations(module)
        )

    def _is_module(self, dotted: str) -> bool:
        path = dotted_to_path(self.src_root, dotted)
        return path.with_name(path.name + MODULE_SUFFIX).is_file()


def _is_ignored(member: Path) -> bool:
    name = member.name
    return (
        name.startswith(".")
        or name == "__pycache__"
        or (name.startswith("__") and name.endswith("__" + MODULE_SUFFIX))
    )


def _module_locations(module: ModuleType) -> list[Path]:
    """Filesystem locations a module was loaded from (none for built-ins)."""
    file = getattr(module, "__file__", None)
    if file:
        return [Path(file).resolve()]
    return [Path(p).resolve() for p in getattr(module, "__path__", [])]


def _module_classes(module: ModuleType) -> Iterator[type]:
    """Classes defined (not imported) in ``module``, in definition order."""
    for value in vars(module).values():
        if inspect.isclass(value) and value.__module__ == module.__name__:
            yield value


def _is_candidate(cls: type, require_type_marker: bool) -> bool:
    if RESERVED_NAME_MARKER in cls.__name__:
        return False
    return not require_type_marker or is_test_class(cls)


def _scan_class(cls: type) -> list[TestUnit]:
    units = []
    for name, member in vars(cls).items():
        if not inspect.isfunction(member) or name.startswith("_"):
            continue
        marker = get_test_marker(member)
        if marker is None or not _takes_no_arguments(member):
            continue
        units.append(TestUnit(cls, member, marker.req_id))
    return units


def _takes_no_arguments(func) -> bool:
    """Whether ``func`` can be called on an instance with no arguments."""
    try:
        params = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return False
    return len(params) == 1 and params[0].kind in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )
