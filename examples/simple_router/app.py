"""Simple router — two routes, one of them a rooted subtree.

Routes:
    1. ``/`` - responds with status code 200 (and catches everything else).
    2. ``/admin/`` - responds with status code 403 for the whole subtree.

Run:
    python app.py
"""

from roost import App, AppConfig, Response

app = App(AppConfig(host="0.0.0.0", port=4506))


@app.route("/")
def index(request, conn_info):
    return Response("Hello Roost!", status=200)


@app.route("/admin/")
def admin(request, conn_info):
    return Response("Restricted!", status=403)


if __name__ == "__main__":
    app.run()
