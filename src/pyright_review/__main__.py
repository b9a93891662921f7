from pyright_review.main import cli

cli()
