from pixi2ces.cli.root import app


app(prog_name="pixi2ces")
