"""Shared test fixtures — sample diffs and temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_diff_rust() -> str:
    """One Rust file: a comment, an added line and a removed line."""
    return textwrap.dedent("""\
        diff --git a/src/main.rs b/src/main.rs
        index 1234567..abcdef0 100644
        --- a/src/main.rs
        +++ b/src/main.rs
        @@ -1,2 +1,3 @@
         fn main() {
        +// comment
        +let x = 1;
        -let y = 2;
    """)


@pytest.fixture
def sample_diff_mixed() -> str:
    """Production Python, a new test file, and a Markdown edit."""
    return textwrap.dedent("""\
        diff --git a/src/app.py b/src/app.py
        index 1111111..2222222 100644
        --- a/src/app.py
        +++ b/src/app.py
        @@ -1,3 +1,4 @@
         import os
        -# old comment
        +# new comment
        +def main():
        +    return os.getcwd()
        -    pass
        diff --git a/tests/test_app.py b/tests/test_app.py
        new file mode 100644
        index 0000000..3333333
        --- /dev/null
        +++ b/tests/test_app.py
        @@ -0,0 +1,5 @@
        +# covers main
        +from src.app import main
        +
        +def test_main():
        +    assert main()
        diff --git a/README.md b/README.md
        index 4444444..5555555 100644
        --- a/README.md
        +++ b/README.md
        @@ -1,1 +1,2 @@
        -# Title
        +# Better title
        +---
    """)


@pytest.fixture
def sample_diff_deleted_file() -> str:
    """A deleted Go file — only removed lines."""
    return textwrap.dedent("""\
        diff --git a/pkg/old.go b/pkg/old.go
        deleted file mode 100644
        index abc1234..0000000
        --- a/pkg/old.go
        +++ /dev/null
        @@ -1,3 +0,0 @@
        -package pkg
        -// Old is unused.
        -func Old() {}
    """)


@pytest.fixture
def sample_diff_binary() -> str:
    """A binary file has a header but no content lines."""
    return textwrap.dedent("""\
        diff --git a/image.png b/image.png
        new file mode 100644
        Binary files /dev/null and b/image.png differ
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "commit.gpgsign", "false"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path


@pytest.fixture
def tmp_git_repo_with_changes(tmp_git_repo: Path) -> Path:
    """A second commit adding a Rust file and editing the README."""
    src = tmp_git_repo / "src"
    src.mkdir()
    (src / "main.rs").write_text(
        "// entry point\n"
        "fn main() {\n"
        '    println!("hi");\n'
        "}\n"
    )
    (tmp_git_repo / "README.md").write_text("# Test repo\n")
    subprocess.run(["git", "add", "."], cwd=tmp_git_repo, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "add main"],
        cwd=tmp_git_repo, capture_output=True, check=True,
    )
    return tmp_git_repo
