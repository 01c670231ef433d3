#setup: pip install -e ".[test]"
#setup: flask --app investcalc.wsgi run --port 5000 --debug

from investcalc.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=3000, debug=True)
