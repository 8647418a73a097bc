from study_map.cli import app

if __name__ == "__main__":
    app()
