"""casework test suite.

Folder taxonomy
- unit/         : Pure functions, domain objects and handlers over in-memory fakes.
- contract/     : One repository suite run against every backend (memory, SQLite, Postgres).
- integration/  : Unit of work, migrations and the message bus against real databases.
- e2e/          : The ``casework`` command line through Click's CliRunner.
- fixtures/     : Shared fixtures loaded via ``pytest_plugins`` (no tests here).

Each test gets the mark of its top-level folder; Postgres tests are also
marked ``postgres`` and skip when Docker is unavailable.
"""
