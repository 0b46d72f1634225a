from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from rich import print as rprint
from rich.console import Console

from cms_seo.app.container import build_container
from cms_seo.app.pipeline import render_page
from cms_seo.domain.errors import SeoPluginError


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="cms-seo", description="SEO meta tags for rendered CMS pages.")
    ap.add_argument("--settings", default=None, help="Path to seo_settings.json (default: from seo.toml / env)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    sub = ap.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Inject title + meta tags into an HTML template")
    render.add_argument("template", help="HTML template file")
    render.add_argument("--content", default=None, help="Page source file (may start with <!-- json ... -->)")
    render.add_argument("--title", default=None, help="Fallback page title")
    render.add_argument("--output", default=None, help="Write result here instead of stdout")

    settings = sub.add_parser("settings", help="Inspect or edit site-wide SEO settings")
    settings_sub = settings.add_subparsers(dest="settings_command", required=True)
    settings_sub.add_parser("show", help="Print effective settings as JSON")

    set_cmd = settings_sub.add_parser("set", help="Update stored settings")
    set_cmd.add_argument("--site-title", default=None)
    set_cmd.add_argument("--site-description", default=None)
    set_cmd.add_argument("--title-separator", default=None)
    set_cmd.add_argument("--social-image", default=None)
    set_cmd.add_argument("--append-site-title", dest="append_site_title", action="store_true", default=None)
    set_cmd.add_argument("--no-append-site-title", dest="append_site_title", action="store_false")
    return ap


def _cmd_render(args: argparse.Namespace) -> int:
    c = build_container(settings_file=args.settings)
    template = Path(args.template).read_text(encoding="utf-8")
    content = Path(args.content).read_text(encoding="utf-8") if args.content else None

    out = render_page(template, store=c.store, content=content, fallback_title=args.title, rewriter=c.rewriter)

    if args.output:
        Path(args.output).write_text(out, encoding="utf-8")
        rprint(f"[bold]Wrote:[/bold] {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(out)
    return 0


def _cmd_settings(args: argparse.Namespace) -> int:
    c = build_container(settings_file=args.settings)
    current = c.store.load()

    if args.settings_command == "show":
        sys.stdout.write(json.dumps(current.to_dict(), indent=4, ensure_ascii=False) + "\n")
        return 0

    overrides = {
        "site_title": args.site_title,
        "site_description": args.site_description,
        "title_separator": args.title_separator,
        "append_site_title": args.append_site_title,
        "social_image": args.social_image,
    }
    updated = replace(current, **{k: v for k, v in overrides.items() if v is not None})
    c.store.save(updated)
    rprint("[green]SEO settings saved successfully![/green]", file=sys.stderr)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "render":
            return _cmd_render(args)
        return _cmd_settings(args)
    except (OSError, SeoPluginError) as e:
        Console(stderr=True).print(f"[red]error:[/red] {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
