"""
End-to-end scenarios: patch text in, files and status lines out.
"""
import textwrap

import pytest

from applypatch import AddFile, PatchError, PatchErrorKind, apply_patch, parse_patch


@pytest.fixture
def project(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text(
        textwrap.dedent("""\
            import os


            def main():
                print("hello")
                return 0


            if __name__ == "__main__":
                main()
        """),
        encoding="utf-8",
    )
    (tmp_path / "README.md").write_text("# Demo\n", encoding="utf-8")
    (tmp_path / "old.txt").write_text("legacy\n", encoding="utf-8")
    return tmp_path


def test_hello_world_scenario(tmp_path):
    text = "*** Begin Patch\n*** Add File: hello.txt\n+Hello, world!\n*** End Patch"
    assert parse_patch(text) == [AddFile(path="hello.txt", contents="Hello, world!\n")]
    assert apply_patch(text, str(tmp_path)) == ["A hello.txt"]
    assert (tmp_path / "hello.txt").read_text(encoding="utf-8") == "Hello, world!\n"


def test_mixed_patch(project):
    patch = textwrap.dedent("""\
        *** Begin Patch
        *** Update File: src/app.py
        @@ def main():
        -    print("hello")
        +    print("hello, patched")
        @@ if __name__ == "__main__":
        -    main()
        +    raise SystemExit(main())
        *** End of File
        *** Add File: src/util.py
        +def helper():
        +    return 42
        *** Delete File: old.txt
        *** Update File: README.md
        *** Move to: docs/README.md
        @@
         # Demo
        +
        +Patched by applypatch.
        *** End Patch
    """)
    status = apply_patch(patch, str(project))
    assert status == ["M src/app.py", "A src/util.py", "D old.txt", "M docs/README.md"]

    app = (project / "src" / "app.py").read_text(encoding="utf-8")
    assert 'print("hello, patched")' in app
    assert app.endswith("    raise SystemExit(main())\n")
    assert (project / "src" / "util.py").read_text(encoding="utf-8") == "def helper():\n    return 42\n"
    assert not (project / "old.txt").exists()
    assert not (project / "README.md").exists()
    assert (project / "docs" / "README.md").read_text(encoding="utf-8") == "# Demo\n\nPatched by applypatch.\n"


def test_indentation_drift_is_tolerated(project):
    patch = textwrap.dedent("""\
        *** Begin Patch
        *** Update File: src/app.py
        @@
        -print("hello")
        -return 0
        +    print("bye")
        +    return 1
        *** End Patch
    """)
    apply_patch(patch, str(project))
    app = (project / "src" / "app.py").read_text(encoding="utf-8")
    assert '    print("bye")\n    return 1\n' in app


def test_failure_midway_keeps_earlier_effects(project):
    patch = textwrap.dedent("""\
        *** Begin Patch
        *** Add File: first.txt
        +ok
        *** Update File: src/app.py
        @@
        -this line does not exist
        +x
        *** End Patch
    """)
    with pytest.raises(PatchError) as exc:
        apply_patch(patch, str(project))
    assert exc.value.kind is PatchErrorKind.MATCH
    assert exc.value.path == "src/app.py"
    assert (project / "first.txt").exists()
