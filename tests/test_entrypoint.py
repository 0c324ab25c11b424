"""Guards for the root ASGI entrypoint shim.

``app.py`` lets hosts that auto-detect an ``app`` object find the service.
It must stay a thin re-export of ``backend.main`` so there is only ever one
application instance.
"""
from __future__ import annotations

import ast
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestAppShim:
    def test_shim_exports_the_same_app(self):
        import app as shim
        from backend.main import app

        assert shim.app is app


class TestSingleApplication:
    """Only backend/main.py may construct a FastAPI instance."""

    def test_no_other_fastapi_constructors(self):
        offenders = []
        for py_file in (PROJECT_ROOT / "backend").rglob("*.py"):
            tree = ast.parse(py_file.read_text())
            for node in ast.walk(tree):
                if (
                    isinstance(node, ast.Call)
                    and isinstance(node.func, ast.Name)
                    and node.func.id == "FastAPI"
                    and py_file.name != "main.py"
                ):
                    offenders.append(f"{py_file.relative_to(PROJECT_ROOT)}:{node.lineno}")
        assert not offenders, f"Unexpected FastAPI() construction in: {offenders}"

    def test_fallback_route_is_registered_last(self):
        from backend.main import app

        paths = [getattr(route, "path", None) for route in app.routes]
        assert paths[-1] == "/{full_path:path}", (
            f"The SPA catch-all must be the final route, got {paths[-1]!r}. "
            "Check the include_router order in backend/main.py."
        )
