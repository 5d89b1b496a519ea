from seavan.cli import app

app(prog_name="seavan")
