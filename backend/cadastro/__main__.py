from cadastro.main import run

run()
