"""Command-line interface for generating and storing passwords."""

from __future__ import annotations

import re
import sys

from .generator import DEFAULT_LENGTH, generate_password
from .store import PasswordStore, StoreError, default_db_path

MIN_CLI_LENGTH = 6

_HELP = """密码管理工具
用法: kfpwd <command> [options]

命令:
  create <length>  生成指定长度的随机密码
  list            显示所有保存的密码
  save <name> <password> [url] 保存密码到数据库
  delete <id>     删除指定ID的密码记录

选项:"""

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _scan_int(text: str, default: int) -> int:
    """Read a leading decimal integer, keeping ``default`` when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else default


def _create(args: list[str]) -> int:
    length = _scan_int(args[0], DEFAULT_LENGTH) if args else DEFAULT_LENGTH
    if length < MIN_CLI_LENGTH:
        print("错误: 密码长度必须大于6")
        return 1
    print("生成的密码:", generate_password(length))
    return 0


def _list(store: PasswordStore) -> int:
    try:
        records = store.list()
    except StoreError as exc:
        print(f"获取密码列表失败: {exc}")
        return 1
    if not records:
        print("没有保存的密码")
        return 0
    print("ID\t创建时间\t\t名称\t\t密码\t\t\tURL")
    for record in records:
        url = record.url or "--"
        created = record.created_at.strftime("%Y-%m-%d %H:%M")
        print(f"{record.id}\t{created}\t{record.name}\t\t{record.value}\t\t{url}")
    return 0


def _save(store: PasswordStore, args: list[str]) -> int:
    if len(args) < 2:
        print("错误: 请提供密码名称和密码值")
        return 1
    name, value = args[0], args[1]
    url = args[2] if len(args) > 2 else ""
    try:
        store.save(name, value, url)
    except StoreError as exc:
        print(f"保存密码失败: {exc}")
        return 1
    print("密码保存成功")
    return 0


def _delete(store: PasswordStore, args: list[str]) -> int:
    if not args:
        print("错误: 请提供要删除的密码ID")
        return 1
    record_id = _scan_int(args[0], 0)
    try:
        store.delete(record_id)
    except StoreError as exc:
        print(exc)
        return 1
    print("密码删除成功")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the tool with ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        store = PasswordStore(default_db_path())
    except StoreError as exc:
        print(f"初始化数据库失败: {exc}")
        return 1

    with store:
        if not args:
            print(_HELP)
            return 0
        command, rest = args[0], args[1:]
        if command == "create":
            return _create(rest)
        if command == "list":
            return _list(store)
        if command == "save":
            return _save(store, rest)
        if command == "delete":
            return _delete(store, rest)
        print(_HELP)
        return 0


if __name__ == "__main__":
    sys.exit(main())