from pathlib import Path
import importlib
import sys
import traceback

root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))


def try_import(name):
    print(f"Testing import: {name}")
    try:
        importlib.import_module(name)
        print(f"{name} OK")
        return True
    except Exception:
        print(f"{name} ERR")
        traceback.print_exc()
        return False


if __name__ == '__main__':
    modules = [
        'templatecreator.core.colors',
        'templatecreator.core.models',
        'templatecreator.core.generator',
        'templatecreator.core.storage',
        'templatecreator.core.settings',
        'templatecreator.ui.main_window',
    ]
    results = [try_import(name) for name in modules]
    raise SystemExit(0 if all(results) else 1)
