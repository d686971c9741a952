from __future__ import annotations


def test_stylesheet_is_served(client) -> None:
    response = client.get("/style.css")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")
    assert ".todo-container" in response.text


def test_plain_html_page_is_served(client) -> None:
    response = client.get("/about.html")

    assert response.status_code == 200
    assert "<h1>About</h1>" in response.text


def test_unknown_file_is_not_found(client) -> None:
    assert client.get("/nope.html").status_code == 404


def test_layout_links_stylesheet(client) -> None:
    response = client.get("/")

    assert 'href="/style.css"' in response.text
    assert 'action="/add"' in response.text
