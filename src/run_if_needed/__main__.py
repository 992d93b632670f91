from run_if_needed.cli import run

if __name__ == "__main__":
    run()
