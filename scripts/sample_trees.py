import shutil
from pathlib import Path

import typer
from rich.console import Console

app = typer.Typer()
console = Console()

BASE_DIR = Path("/tmp/begone_test_trees")


def setup_tree(name: str) -> Path:
    BASE_DIR.mkdir(parents=True, exist_ok=True)

    tree_dir = BASE_DIR / name
    if tree_dir.exists():
        shutil.rmtree(tree_dir)
    tree_dir.mkdir()
    console.print(f"[green]Initialized tree at {tree_dir}[/green]")
    return tree_dir


def touch(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


def build_polyglot_tree(root: Path) -> None:
    """
    Lay out one project per ecosystem, each with its build artifacts, plus a
    nested JavaScript monorepo and a few decoys that must not be touched.
    """
    # Rust
    touch(root / "rust-app" / "Cargo.toml", '[package]\nname = "rust-app"\n')
    touch(root / "rust-app" / "target" / "debug" / "rust-app")

    # Python, with a venv and bytecode caches
    touch(root / "py-app" / "pyproject.toml", '[project]\nname = "py-app"\n')
    touch(root / "py-app" / ".venv" / "pyvenv.cfg")
    touch(root / "py-app" / "__pycache__" / "main.cpython-312.pyc")
    touch(root / "py-app" / ".pytest_cache" / "README.md")

    # JavaScript monorepo with a nested package
    touch(root / "mono" / "package.json", '{"name": "mono", "private": true}')
    touch(root / "mono" / "node_modules" / "left-pad" / "index.js")
    touch(root / "mono" / "packages" / "a" / "package.json", '{"name": "a"}')
    touch(root / "mono" / "packages" / "a" / "node_modules" / "lodash" / "index.js")
    touch(root / "mono" / "packages" / "a" / "dist" / "index.js")

    # Java (Gradle)
    touch(root / "java-app" / "build.gradle.kts", "plugins { java }\n")
    touch(root / "java-app" / "build" / "classes" / "Main.class")
    touch(root / "java-app" / ".gradle" / "checksums" / "checksums.lock")

    # Go
    touch(root / "go-app" / "go.mod", "module example.com/go-app\n")
    touch(root / "go-app" / "bin" / "go-app")

    # .NET, detected through a suffix pattern
    touch(root / "dotnet-app" / "App.csproj", "<Project />\n")
    touch(root / "dotnet-app" / "bin" / "Debug" / "App.dll")
    touch(root / "dotnet-app" / "obj" / "project.assets.json", "{}")

    # Decoys: artifacts without an indicator, and an indicator one level too deep
    touch(root / "notes" / "target" / "keep.txt")
    touch(root / "deep" / "nested" / "Cargo.toml", '[package]\nname = "deep"\n')
    touch(root / "deep" / "target" / "keep.txt")


@app.command()
def polyglot():
    """Create a workspace with one project per supported ecosystem."""
    tree_dir = setup_tree("polyglot")
    build_polyglot_tree(tree_dir)
    console.print(f"[bold]Created polyglot tree at: {tree_dir}[/bold]")


@app.command()
def empty():
    """Create a workspace with no projects at all."""
    tree_dir = setup_tree("empty")
    touch(tree_dir / "README.md", "nothing to clean here\n")
    console.print(f"[bold]Created empty tree at: {tree_dir}[/bold]")


@app.command()
def destroy():
    """Remove every sample workspace created by this script."""
    if not BASE_DIR.exists():
        console.print(f"[blue]Nothing to remove at {BASE_DIR}.[/blue]")
        return
    trees = sorted(p.name for p in BASE_DIR.iterdir())
    shutil.rmtree(BASE_DIR)
    console.print(f"[green]Removed {len(trees)} sample trees ({', '.join(trees)}) from {BASE_DIR}.[/green]")


if __name__ == "__main__":
    app()
