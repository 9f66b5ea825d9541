from hex2b64.main import run

if __name__ == "__main__":
    run()
