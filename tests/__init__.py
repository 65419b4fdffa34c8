"""TIDBITS test suite.

Folder taxonomy
- unit/  : One module at a time: currency, strings, arrays, serialization,
           phone, urls, logging setup and the CLI helpers.
- e2e/   : The ``tidbits`` command driven through ``click.testing.CliRunner``.

General guidance
- Case tables go in ``pytest.mark.parametrize``; one behavior per test.
- Markers (``unit``, ``e2e``) are added from the folder by ``conftest.py``.
- Anything that writes files uses ``tmp_path`` or the runner's isolated
  filesystem.
"""
