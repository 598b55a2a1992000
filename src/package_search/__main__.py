from package_search.cli.main import cli

cli(prog_name="package-search")
