#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from flask import Flask, flash, get_flashed_messages, jsonify, redirect, render_template, request, url_for

from constants import ACCEPT_FORMATS, DATA_FILE, SEARCH_API_URL, SECRET_KEY
from crawler import load_existing
from search_client import SearchClient
from search_view import SearchView

app = Flask(__name__)
app.config["SECRET_KEY"] = SECRET_KEY


def make_search_client() -> SearchClient:
    return SearchClient(SEARCH_API_URL)


@app.route("/")
def index():
    view = SearchView(
        query=request.args.get("q", ""),
        show_info=request.args.get("info") == "1",
    )
    for message in get_flashed_messages():
        view.error = message

    if view.query.strip():
        client = make_search_client()
        try:
            view.search(client, view.query)
        finally:
            client.close()

    return render_template(
        "index.html",
        view=view,
        accept_formats=ACCEPT_FORMATS,
        search_api_url=SEARCH_API_URL,
    )


@app.route("/search", methods=["POST"])
def search():
    query = request.form.get("q", "")
    if not query.strip():
        view = SearchView()
        view.reject_empty()
        flash(view.error)
        return redirect(url_for("index"))
    return redirect(url_for("index", q=query))


@app.route("/snapshot")
def snapshot():
    return jsonify(load_existing(DATA_FILE).snapshot)


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8080, debug=True)
