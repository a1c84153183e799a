"""
MailBridge CLI — ``mailbridge`` command group.

Commands:
    check       Validate mail configuration loaded from the environment.
    send-test   Send a test email through a configured driver.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import click

from . import __version__
from .config import MailConfig
from .faults import MailFault


def _load_mail_config(env_file: Optional[str] = None) -> MailConfig:
    """Load mail config from the environment (and ``.env``)."""
    return MailConfig.from_env(dotenv_path=env_file)


@click.group()
@click.version_option(__version__, prog_name="mailbridge")
@click.option("--env-file", default=None, help="Path to a .env file to load.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, env_file: Optional[str], verbose: bool) -> None:
    """MailBridge — driver-based mail sending."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["env_file"] = env_file


@cli.command("check")
@click.pass_context
def cmd_check(ctx: click.Context) -> None:
    """Validate mail configuration."""
    config = _load_mail_config(ctx.obj.get("env_file"))

    click.echo(click.style("Mail Configuration Check", fg="cyan", bold=True))
    click.echo("─" * 40)
    click.echo(f"  Default driver:  {config.default}")

    click.echo(f"\n  Drivers ({len(config.drivers)}):")
    for entry in config.drivers:
        mark = "*" if entry.name == config.default else " "
        click.echo(f"    {mark} {entry.name} ({entry.driver.__name__})")

    issues = []
    if config.default not in config.driver_names():
        issues.append(f"default driver {config.default!r} has no configured entry")
    for name in config.duplicate_names():
        issues.append(f"driver {name!r} is defined more than once; only the first is used")

    if issues:
        click.echo(click.style(f"\n  Warnings ({len(issues)}):", fg="yellow"))
        for issue in issues:
            click.echo(f"    ⚠ {issue}")
        sys.exit(1)

    click.echo(click.style("\n  ✓ Configuration looks good!", fg="green"))


@cli.command("send-test")
@click.argument("to")
@click.option("--driver", "driver_name", default=None, help="Driver name (default: configured default).")
@click.option("--from", "from_email", default="noreply@localhost", help="Sender address.")
@click.option("--subject", default="MailBridge Test", help="Subject line.")
@click.option("--body", default=None, help="Plain text body.")
@click.pass_context
def cmd_send_test(
    ctx: click.Context,
    to: str,
    driver_name: Optional[str],
    from_email: str,
    subject: str,
    body: Optional[str],
) -> None:
    """Send a test email to TO."""
    from .mail import Mail
    from .service import MailService

    config = _load_mail_config(ctx.obj.get("env_file"))
    service = MailService(config)
    service.boot()

    if driver_name is None:
        driver_name = config.default
    mail = Mail(
        to=to,
        from_=from_email,
        subject=subject,
        body=body or (
            "This is a test email sent from the MailBridge CLI.\n\n"
            f"Driver: {driver_name}\n"
        ),
    )

    try:
        asyncio.run(service.send(mail, driver_name))
    except MailFault as e:
        click.echo(click.style(f"✗ {e}", fg="red"), err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(click.style(f"✗ Send failed: {type(e).__name__}: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style(f"✓ Test email sent to {to} via {driver_name}", fg="green"))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
