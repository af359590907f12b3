"""依存境界（core/render/interactive/api）の破りを検出するテスト。"""

from __future__ import annotations

import ast
from pathlib import Path


def _repo_root() -> Path:
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / "src").is_dir() and (parent / "tests").is_dir():
            return parent
    raise RuntimeError("repo root が見つからない")


def _module_name_for_path(*, path: Path, src_root: Path) -> tuple[str, bool]:
    parts = list(path.relative_to(src_root).parts)
    is_package = parts[-1] == "__init__.py"
    if is_package:
        parts = parts[:-1]
    else:
        parts[-1] = parts[-1].removesuffix(".py")
    return ".".join(parts), is_package


def _resolve_importfrom_targets(
    *,
    current_module: str,
    is_package: bool,
    node: ast.ImportFrom,
) -> set[str]:
    level = int(node.level or 0)
    if level == 0:
        base = "" if node.module is None else str(node.module)
    else:
        package = current_module if is_package else current_module.rsplit(".", 1)[0]
        parts = package.split(".")
        up = level - 1
        if up >= len(parts):
            raise ValueError(f"相対 import の解決に失敗: {current_module!r} level={level}")
        base = ".".join(parts[: len(parts) - up])
        if node.module is not None:
            base = f"{base}.{node.module}"

    if not base:
        return set()
    targets = {base}
    targets.update(f"{base}.{alias.name}" for alias in node.names if alias.name != "*")
    return targets


def _imports_in_file(*, path: Path, src_root: Path) -> set[str]:
    current_module, is_package = _module_name_for_path(path=path, src_root=src_root)
    modules: set[str] = set()
    for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"))):
        if isinstance(node, ast.Import):
            modules.update(str(alias.name) for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            modules.update(
                _resolve_importfrom_targets(
                    current_module=current_module, is_package=is_package, node=node
                )
            )
    return modules


def _assert_no_forbidden_imports(*, package: str, forbidden_prefixes: tuple[str, ...]) -> None:
    repo_root = _repo_root()
    src_root = repo_root / "src"
    root = src_root / "pirouette" / package
    violations: list[str] = []
    for path in sorted(root.rglob("*.py")):
        bad = sorted(
            m
            for m in _imports_in_file(path=path, src_root=src_root)
            if m.startswith(forbidden_prefixes)
        )
        if bad:
            violations.append(f"{path.relative_to(repo_root)}: {', '.join(bad)}")

    if violations:
        joined = "\n".join(violations)
        raise AssertionError(f"依存境界違反の import を検出:\n{joined}")


def test_core_is_headless() -> None:
    _assert_no_forbidden_imports(
        package="core",
        forbidden_prefixes=(
            "pirouette.render",
            "pirouette.interactive",
            "pirouette.api",
            "pyglet",
            "PIL",
        ),
    )


def test_render_does_not_depend_on_interactive() -> None:
    _assert_no_forbidden_imports(
        package="render",
        forbidden_prefixes=("pirouette.interactive", "pirouette.api", "pyglet"),
    )


def test_relative_imports_are_resolved() -> None:
    node = ast.parse("from ..render import canvas\n").body[0]
    assert isinstance(node, ast.ImportFrom)
    got = _resolve_importfrom_targets(
        current_module="pirouette.core.layout",
        is_package=False,
        node=node,
    )
    assert "pirouette.render" in got
    assert "pirouette.render.canvas" in got

    node = ast.parse("from . import geometric\n").body[0]
    assert isinstance(node, ast.ImportFrom)
    got = _resolve_importfrom_targets(
        current_module="pirouette.core.motifs",
        is_package=True,
        node=node,
    )
    assert "pirouette.core.motifs.geometric" in got
