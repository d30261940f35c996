# kfpwd

A small command-line password tool. It generates random passwords and keeps
named passwords in a SQLite database file called `passwords.db`. The file is
created in the directory of the running program (the directory of
`sys.argv[0]`), so with an installed `kfpwd` command it sits next to that
command's script. The tool needs nothing outside the Python standard library.

The tool prints its messages and help text in Chinese.

## Install

```
pip install .
```

## Usage

```
kfpwd <command> [options]
```

`python -m kfpwd.cli <command> [options]` does the same.

| Command | What it does |
| --- | --- |
| `create [length]` | Print a random password. The default length is 12. A length below 6 is refused with an error. Text that does not start with a number falls back to 12. |
| `list` | Print every saved password as a tab-separated table (ID, creation time, name, password, URL), newest first. A missing URL is shown as `--`. |
| `save <name> <password> [url]` | Save a password under a name, with an optional URL. |
| `delete <id>` | Delete the record with the given ID. It fails when there is no such record. |

With no command, or with a command it does not know, `kfpwd` prints help and
exits with status 0. Errors exit with status 1. Every command, `create`
included, opens the database first and creates it if it does not exist yet.

Examples:

```
kfpwd create 16
kfpwd save mail password https://mail.example.com
kfpwd list
kfpwd delete 1
```

### Generated passwords

A generated password is built from letters and digits using the `secrets`
module. Its first character is a lowercase letter, its second an uppercase
letter and its third a digit. Its last character is always one of
`!@#$%^&*=+`, and no other position holds a special character.

## Library use

```python
from kfpwd.generator import generate_password
from kfpwd.store import PasswordStore, default_db_path

print(generate_password(16))

password = "password"
with PasswordStore(default_db_path()) as store:
    store.save("mail", password, "https://mail.example.com")
    for record in store.list():
        print(record.id, record.name, record.url, record.created_at)
```

- `kfpwd.generator.generate_password(length)` returns a password of `length`
  characters; lengths below 4 are raised to 4 (the 6-character minimum is
  enforced only by the `create` command).
- `kfpwd.generator.ensure_char_type(password, charset, position)` returns the
  string with a random character from `charset` at `position`. An empty string
  or a position past the end is returned unchanged.
- `kfpwd.store.PasswordStore(path)` opens (and if needed creates) the database
  at `path`. It is a context manager and has `save`, `list`, `delete` and
  `close`.
- `PasswordStore.list()` returns `PasswordRecord` objects with `id`, `name`,
  `value`, `url` (an empty string when none was given) and `created_at` (a
  timezone-aware UTC `datetime`).
- Database failures raise `kfpwd.store.StoreError`; `PasswordStore.delete`
  also raises it when no record has the given ID.

## What it does not do

- Passwords are stored in the database as plain text. Nothing is encrypted and
  there is no master password.
- There is no command to edit a saved record or to search for one; `list`
  always shows everything.
- The database location is fixed to the program's directory and cannot be
  changed from the command line.

## Development

```
pip install -e ".[test]"
pytest
```