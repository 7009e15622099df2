from sample_api.main import run

run()
