# UrlManip — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional

import typer
from rich import print

from .config import Settings
from .core.errors import UrlError
from .core.normalizer import UrlNormalizer
from .logging_config import configure_logging

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _run(fn, *args):
	try:
		return fn(*args)
	except UrlError as e:
		print(f"[red]{e}[/red]")
		raise typer.Exit(code=1)


@app.callback()
def main_callback(
	ctx: typer.Context,
	log_level: Optional[str] = typer.Option(None, help="Log level (overrides env)"),
):
	"""Normalize, encode and compare URLs."""
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=cfg.log_dir or None)
	ctx.obj = UrlNormalizer(settings=cfg)


@app.command()
def valid(ctx: typer.Context, uri: str = typer.Argument(..., help="URL to check")):
	"""Print whether URI is a valid URL; exit 1 when it is not."""
	ok = ctx.obj.is_valid(uri)
	print(ok)
	if not ok:
		raise typer.Exit(code=1)


@app.command("same-host")
def same_host(
	ctx: typer.Context,
	url1: str = typer.Argument(...),
	url2: str = typer.Argument(...),
	cut_www: Optional[bool] = typer.Option(None, "--cut-www/--keep-www", help="Ignore a leading www. label"),
):
	"""Compare the hostnames of two URLs."""
	print(_run(ctx.obj.is_same_host, url1, url2, cut_www))


@app.command()
def encode(ctx: typer.Context, uri: str = typer.Argument(...)):
	"""Percent-encode path, query and fragment."""
	typer.echo(_run(ctx.obj.encode, uri))


@app.command()
def decode(ctx: typer.Context, uri: str = typer.Argument(...)):
	"""Decode percent escapes and a punycode hostname."""
	typer.echo(_run(ctx.obj.decode, uri))


@app.command("to-punycode")
def to_punycode(ctx: typer.Context, uri: str = typer.Argument(...)):
	typer.echo(_run(ctx.obj.to_punycode, uri))


@app.command("from-punycode")
def from_punycode(ctx: typer.Context, uri: str = typer.Argument(...)):
	typer.echo(_run(ctx.obj.from_punycode, uri))


@app.command()
def hostname(
	ctx: typer.Context,
	uri: str = typer.Argument(...),
	decode: bool = typer.Option(False, "--decode", help="Convert punycode labels to Unicode"),
	cut_www: Optional[bool] = typer.Option(None, "--cut-www/--keep-www"),
):
	"""Print the hostname of URI (empty when it has none)."""
	typer.echo(_run(ctx.obj.get_hostname, uri, decode, cut_www) or "")


@app.command()
def parse(ctx: typer.Context, uri: str = typer.Argument(...)):
	"""Print the URL components."""
	print(_run(ctx.obj.parse_url, uri).as_dict())


@app.command("http-less")
def http_less_cmd(ctx: typer.Context, uri: str = typer.Argument(...)):
	typer.echo(ctx.obj.http_less(uri))


@app.command("add-http")
def add_http_cmd(
	ctx: typer.Context,
	uri: str = typer.Argument(...),
	secure: Optional[bool] = typer.Option(None, "--secure/--plain", help="Use https://"),
):
	typer.echo(ctx.obj.add_http(uri, secure))


@app.command()
def proto(ctx: typer.Context, uri: str = typer.Argument(...)):
	"""Print http/https, or false when URI has neither scheme."""
	typer.echo(ctx.obj.get_proto(uri) or "false")


@app.command("www-less")
def www_less_cmd(ctx: typer.Context, uri: str = typer.Argument(...)):
	typer.echo(ctx.obj.www_less(uri))


@app.command("add-www")
def add_www_cmd(ctx: typer.Context, uri: str = typer.Argument(...)):
	typer.echo(ctx.obj.add_www(uri))


@app.command("print-config")
def print_config(ctx: typer.Context):
	"""Print effective configuration from environment."""
	print(ctx.obj.settings.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
