from mstweight.cli import app

app(prog_name="mstweight")
