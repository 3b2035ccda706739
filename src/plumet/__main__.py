from plumet.cli.main import cli

cli()
