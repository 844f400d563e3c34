#!/usr/bin/env python3
"""
Bookmark - group, tag and quickly access your URLs from the terminal.

Without a subcommand the interactive session is started.
"""
import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from models.bookmark import Bookmark, BrowserType
from models.bookmark_manager import BookmarkManager
from models.browser_parsers import ChromeParser
from models.errors import BookmarkError, InputError
from models.path_manager import PathManager
from models.record_filter import GroupFilter, TagsFilter
from models.sort import SortBy, SortConfig
from ui.app_style import AppStyle
from utils.logger import logger, setup_logging

__version__ = "0.1.0"

console = Console()

def print_bookmarks(urls: List[Bookmark]) -> None:
    """Output bookmarks as a table"""
    table = Table(title="Bookmarks")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("URL", style="blue")
    table.add_column("Group", style="magenta")
    table.add_column("Tags", style="yellow")

    for url in urls:
        table.add_row(url.id, url.name, url.url, url.group, url.tags_as_string())

    console.print(table)

def cmd_group_list(args, manager: BookmarkManager) -> None:
    for group in manager.list_groups():
        console.print(group)

def cmd_add(args, manager: BookmarkManager) -> None:
    name = args.name or Prompt.ask("Name")
    url = args.url or Prompt.ask("URL")
    if not name or not url:
        raise InputError("name and URL are required")
    record = manager.create(name, url, args.group, args.tag or [])
    console.print(f"[green]Added bookmark '{record.name}' to '{record.group}' group (id: {record.id})[/green]")

def cmd_list(args, manager: BookmarkManager) -> None:
    sort = SortConfig(SortBy.parse(args.sort)) if args.sort else None
    group_filter = GroupFilter(args.group) if args.group else None
    urls = manager.list_urls(filter=group_filter, sort=sort)
    if args.tag:
        urls = TagsFilter(args.tag).apply(urls)
    print_bookmarks(urls)

def cmd_delete(args, manager: BookmarkManager) -> None:
    if not manager.delete(args.id):
        raise InputError(f"bookmark with id '{args.id}' not found")
    console.print(f"[green]Deleted bookmark {args.id}[/green]")

def _print_changed(record_id: str, record: Optional[Bookmark]) -> None:
    if record is None:
        raise InputError(f"bookmark with id '{record_id}' not found")
    print_bookmarks([record])

def cmd_tag(args, manager: BookmarkManager) -> None:
    _print_changed(args.id, manager.tag(args.id, args.tag))

def cmd_untag(args, manager: BookmarkManager) -> None:
    _print_changed(args.id, manager.untag(args.id, args.tag))

def cmd_chgroup(args, manager: BookmarkManager) -> None:
    _print_changed(args.id, manager.change_group(args.id, args.group))

def cmd_chname(args, manager: BookmarkManager) -> None:
    _print_changed(args.id, manager.change_name(args.id, args.name))

def cmd_churl(args, manager: BookmarkManager) -> None:
    _print_changed(args.id, manager.change_url(args.id, args.url))

def cmd_import_legacy(args, manager: BookmarkManager) -> None:
    old_file = args.old_file or PathManager().legacy_registry_file()
    imported = manager.import_from_v0_0_x(old_file)
    console.print(f"[green]Imported {len(imported)} bookmarks from {old_file}[/green]")

def cmd_import_browser(args, manager: BookmarkManager) -> None:
    from ui.interactive_mode import enter_interactive_import

    browser = BrowserType(args.browser)
    bookmarks_file = args.bookmarks_file or PathManager().get_bookmark_path(browser)
    root = ChromeParser().parse(bookmarks_file)
    enter_interactive_import(manager, root, AppStyle(args.theme))

def cmd_interactive(args, manager: BookmarkManager) -> None:
    from ui.interactive_mode import enter_interactive_mode

    enter_interactive_mode(manager, AppStyle(args.theme))

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookmark",
        description="Group, tag and quickly access your URLs from terminal",
        epilog="Run without a command to browse bookmarks interactively.",
    )
    parser.add_argument("-f", "--file", metavar="FILE", help="Path to file storing the URLs")
    parser.add_argument("--theme", choices=["dark", "light"], default="dark", help="Interactive mode colors")
    parser.add_argument("--debug", action="store_true", help="Log debug messages")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(func=cmd_interactive)

    subparsers = parser.add_subparsers(dest="command")

    group_parser = subparsers.add_parser("group", help="Manage URL groups")
    group_subparsers = group_parser.add_subparsers(dest="group_command", required=True)
    group_list = group_subparsers.add_parser("list", help="List groups")
    group_list.set_defaults(func=cmd_group_list)

    add = subparsers.add_parser("add", help="Add bookmark URL")
    add.add_argument("name", nargs="?", help="Bookmark name")
    add.add_argument("url", nargs="?", help="URL address")
    add.add_argument("-g", "--group", help="Group to which URL should be assigned")
    add.add_argument("-t", "--tag", action="append",
                     help="URL tags. Accepts multiple values: add NAME URL -t tag1 -t tag2")
    add.set_defaults(func=cmd_add)

    ls = subparsers.add_parser("list", aliases=["ls"], help="List bookmarks")
    ls.add_argument("-g", "--group", help="Group from which URLs should be listed")
    ls.add_argument("-t", "--tag", action="append", help="List URLs having any of the tags")
    ls.add_argument("--sort", choices=[s.value for s in SortBy],
                    help="Sort bookmarks by one of the columns")
    ls.set_defaults(func=cmd_list)

    delete = subparsers.add_parser("delete", help="Delete bookmark")
    delete.add_argument("id", help="Bookmark id to delete")
    delete.set_defaults(func=cmd_delete)

    tag = subparsers.add_parser("tag", help="Add tag to bookmark")
    tag.add_argument("id", help="Bookmark id to tag")
    tag.add_argument("tag", help="Tag to add")
    tag.set_defaults(func=cmd_tag)

    untag = subparsers.add_parser("untag", help="Remove tag from bookmark")
    untag.add_argument("id", help="Bookmark id to untag")
    untag.add_argument("tag", help="Tag to remove")
    untag.set_defaults(func=cmd_untag)

    chgroup = subparsers.add_parser("chgroup", aliases=["chg"], help="Change group of the bookmark")
    chgroup.add_argument("id", help="Bookmark id to change the group")
    chgroup.add_argument("group", help="New group")
    chgroup.set_defaults(func=cmd_chgroup)

    chname = subparsers.add_parser("chname", aliases=["chn"], help="Change name of the bookmark")
    chname.add_argument("id", help="Bookmark id to change the name")
    chname.add_argument("name", help="New name")
    chname.set_defaults(func=cmd_chname)

    churl = subparsers.add_parser("churl", aliases=["chu"], help="Change URL of the bookmark")
    churl.add_argument("id", help="Bookmark id to change the URL")
    churl.add_argument("url", help="New URL")
    churl.set_defaults(func=cmd_churl)

    import_parser = subparsers.add_parser("import", help="Import bookmarks from the previous version or browsers")
    import_subparsers = import_parser.add_subparsers(dest="import_command", required=True)
    legacy = import_subparsers.add_parser("legacy", help="Import bookmarks of bookmark v0.0.x")
    legacy.add_argument("--old-file", help="Path to the v0.0.x URLs file")
    legacy.set_defaults(func=cmd_import_legacy)
    for browser in BrowserType:
        browser_parser = import_subparsers.add_parser(
            browser.value, help=f"Interactively import bookmarks from {browser.value.capitalize()}")
        browser_parser.add_argument("bookmarks_file", nargs="?",
                                    help="Path to the browser bookmarks file, the default profile's if omitted")
        browser_parser.set_defaults(func=cmd_import_browser, browser=browser.value)

    return parser

def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # The interactive session owns the terminal, no console logging there
    interactive = args.func in (cmd_interactive, cmd_import_browser)
    setup_logging(console=not interactive, level=logging.DEBUG if args.debug else logging.INFO)

    try:
        registry_file = PathManager().registry_file(args.file)
        logger.debug(f"Using bookmarks file {registry_file}")
        manager = BookmarkManager.file_based(registry_file)
        args.func(args, manager)
    except InputError as e:
        console.print(f"[red]error: {e}[/red]")
        sys.exit(1)
    except BookmarkError as e:
        logger.error(f"Command failed: {e}")
        console.print(f"[red]error: {e}[/red]")
        sys.exit(1)

if __name__ == "__main__":
    main()
