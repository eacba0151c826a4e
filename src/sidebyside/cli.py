"""
CLI entry point.

Commands:
- ask <prompt...>: Query all providers and show answers side by side
- providers: List configured providers
- health: Check provider connectivity

Flags:
- --debug: Enable debug logging
- --json: (ask) Print results as JSON instead of columns
"""

import asyncio
import json
import logging
import shutil
import sys
import textwrap
from itertools import zip_longest

from sidebyside.core.config import Settings, get_settings
from sidebyside.core.logging import get_logger, setup_logging
from sidebyside.core.prompt import EmptyPromptError, validate_prompt
from sidebyside.core.types import AIResponse

COLUMN_GAP = " | "


def _pop_flag(args: list[str], flag: str) -> bool:
    if flag in args:
        args.remove(flag)
        return True
    return False


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    settings = get_settings()

    debug_mode = _pop_flag(args, "--debug")
    setup_logging(
        level=logging.DEBUG if debug_mode else logging.WARNING,
        log_file=settings.log_path if debug_mode else None,
    )
    logger = get_logger("cli")

    if not args:
        print("Usage: sidebyside [--debug] <command>")
        print("Commands: ask <prompt> [--json], providers, health")
        return 1

    command, rest = args[0], args[1:]

    if command == "ask":
        as_json = _pop_flag(rest, "--json")
        try:
            prompt = validate_prompt(" ".join(rest))
        except EmptyPromptError as e:
            print(f"Error: {e}")
            return 1
        logger.debug(f"Prompt: {prompt[:100]}")
        return asyncio.run(_ask(settings, prompt, as_json))

    if command == "providers":
        return _list_providers(settings)

    if command == "health":
        return asyncio.run(_health_check(settings))

    print(f"Unknown command: {command}")
    return 1


async def _ask(settings: Settings, prompt: str, as_json: bool) -> int:
    """Aggregate one prompt and print the results."""
    from sidebyside.core.aggregator import Aggregator
    from sidebyside.llm.registry import build_descriptors

    try:
        aggregator = Aggregator(build_descriptors(settings))
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if not as_json:
        for provider in aggregator.providers:
            print(f"  {provider.name}: waiting...")
        print()

    try:
        responses = await aggregator.generate(prompt)
    finally:
        await aggregator.close()

    if as_json:
        print(json.dumps([r.to_dict() for r in responses], indent=2, ensure_ascii=False))
    else:
        width = shutil.get_terminal_size((120, 24)).columns
        print(render_columns(responses, width))
    return 0


def _format_header(response: AIResponse) -> str:
    if response.ok:
        return f"{response.provider} ({response.response_time} ms)"
    return f"{response.provider} [ERROR] ({response.response_time} ms)"


def render_columns(responses: list[AIResponse], width: int = 120) -> str:
    """Lay responses out as equal-width text columns."""
    if not responses:
        return ""

    column_width = max(20, (width - len(COLUMN_GAP) * (len(responses) - 1)) // len(responses))
    columns = []
    for response in responses:
        body = response.response if response.ok else response.error
        lines = [_format_header(response)[:column_width], "-" * column_width]
        for paragraph in body.splitlines() or [""]:
            lines.extend(textwrap.wrap(paragraph, column_width) or [""])
        columns.append(lines)

    rows = []
    for cells in zip_longest(*columns, fillvalue=""):
        rows.append(COLUMN_GAP.join(cell.ljust(column_width) for cell in cells).rstrip())
    return "\n".join(rows)


def _list_providers(settings: Settings) -> int:
    from sidebyside.llm.registry import load_provider_specs

    try:
        specs = load_provider_specs(settings.providers_file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    for spec in specs:
        timeout = f", timeout={spec.timeout:g}s" if spec.timeout is not None else ""
        print(f"  {spec.name}: {spec.model} [{spec.kind.value}{timeout}]")
    return 0


async def _health_check(settings: Settings) -> int:
    """Check every configured provider."""
    from sidebyside.llm.registry import build_adapter, load_provider_specs

    try:
        specs = load_provider_specs(settings.providers_file)
        adapters = [build_adapter(spec, settings) for spec in specs]
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print("Checking providers...")
    all_ok = True
    for spec, adapter in zip(specs, adapters):
        try:
            healthy = await adapter.health_check()
        finally:
            await adapter.close()
        all_ok = all_ok and healthy
        print(f"  {spec.name}: {'OK' if healthy else 'FAILED'}")
    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
