"""
Main CLI entry point for BuyerMap
"""

import asyncio

import click

from .. import __version__
from ..core.config import Config
from ..core.observability import setup_logging
from ..services.beta_access_service import BetaAccessNotConfigured, BetaAccessService
from ..services.slack_service import SlackService


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    BuyerMap - validate ICP assumptions against customer interviews

    Operator tools for the beta gate, Slack notifications and the API server.
    """
    setup_logging()


# ============================================================================
# config
# ============================================================================

@cli.group('config')
def config_group():
    """Inspect configuration"""
    pass


@config_group.command('check')
def check_config():
    """
    Show which settings are present in the environment

    Examples:
        buyermap config check
    """
    config = Config.from_env()

    click.echo(f"\n{'='*60}")
    click.echo("⚙️  BuyerMap configuration")
    click.echo(f"{'='*60}\n")

    for name, present in config.summary().items():
        click.echo(f"{'✅' if present else '❌'} {name}")

    try:
        config.validate_supabase()
    except ValueError as e:
        click.echo(f"\n⚠️  {e}")


# ============================================================================
# slack
# ============================================================================

@cli.group('slack')
def slack_group():
    """Slack notifications"""
    pass


@slack_group.command('test')
@click.option('--webhook-url', help='Override SLACK_WEBHOOK_URL')
def slack_test(webhook_url):
    """
    Send a test notification to the Slack webhook

    Examples:
        buyermap slack test
        buyermap slack test --webhook-url https://hooks.slack.com/services/...
    """
    url = webhook_url or Config.from_env().slack_webhook_url
    if not url:
        click.echo("❌ Error: SLACK_WEBHOOK_URL not configured", err=True)
        raise SystemExit(1)

    result = asyncio.run(SlackService(url).send_test_notification())

    if result.success:
        click.echo("✅ Test notification sent to Slack!")
    else:
        click.echo(f"❌ Error: {result.error}", err=True)
        raise SystemExit(1)


# ============================================================================
# beta
# ============================================================================

@cli.group('beta')
def beta_group():
    """Beta access gate"""
    pass


@beta_group.command('verify')
@click.option('--password', prompt=True, hide_input=True, help='Password to check')
def beta_verify(password):
    """
    Check a password against BETA_ACCESS_PASSWORD

    Examples:
        buyermap beta verify
    """
    service = BetaAccessService(Config.from_env().beta_access_password)
    try:
        if service.verify(password):
            click.echo("✅ Password accepted")
        else:
            click.echo("❌ Password rejected")
            raise SystemExit(1)
    except BetaAccessNotConfigured:
        click.echo("❌ Error: BETA_ACCESS_PASSWORD not configured", err=True)
        raise SystemExit(2)


# ============================================================================
# serve
# ============================================================================

@cli.command('serve')
@click.option('--host', default='127.0.0.1', show_default=True)
@click.option('--port', default=8000, show_default=True, type=int)
@click.option('--reload', is_flag=True, help='Auto-reload on code changes')
def serve(host, port, reload):
    """
    Run the API server

    Examples:
        buyermap serve --port 8080
    """
    import uvicorn
    uvicorn.run("buyermap.api.app:app", host=host, port=port, reload=reload)


if __name__ == '__main__':
    cli()
