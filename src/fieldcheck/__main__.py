from fieldcheck.cli import app

app()
