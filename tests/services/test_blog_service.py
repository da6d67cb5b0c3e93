import textwrap

import pytest

from makos.schemas.blog import BlogPost
from makos.services import blog_service as blog_module
from makos.services.blog_service import (
    BlogService,
    calculate_reading_time,
    get_all_blog_posts,
    get_blog_post,
    load_blog_posts,
    parse_post_file,
    strip_tags,
)


def make_post(slug, date):
    return BlogPost(
        slug=slug,
        title=slug.title(),
        excerpt="",
        content="<p>hi</p>",
        date=date,
        author="Makos.ai Team",
    )


def write_post(directory, filename, body):
    path = directory / filename
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_catalogue_contains_shipped_posts():
    slugs = {post.slug for post in blog_module.blog_service.posts}
    assert slugs == {
        "how-ai-is-transforming-education",
        "creating-effective-worksheets",
        "blooms-taxonomy-question-stems-guide",
    }


def test_get_all_blog_posts_newest_first_ties_keep_source_order():
    posts = get_all_blog_posts()

    assert [p.slug for p in posts] == [
        "how-ai-is-transforming-education",
        "blooms-taxonomy-question-stems-guide",
        "creating-effective-worksheets",
    ]
    dates = [p.date for p in posts]
    assert dates == sorted(dates, reverse=True)


def test_get_all_blog_posts_does_not_reorder_catalogue():
    service = BlogService(
        [make_post("old", "2025-01-01"), make_post("new", "2026-01-01")]
    )

    assert [p.slug for p in service.get_all_blog_posts()] == ["new", "old"]
    assert [p.slug for p in service.posts] == ["old", "new"]


def test_get_blog_post_found():
    post = get_blog_post("creating-effective-worksheets")

    assert post is not None
    assert post.title == "5 Tips for Creating Effective Worksheets That Students Love"
    assert post.date == "2026-01-30"
    assert post.tags == ["Worksheets", "Teaching Tips", "Education"]
    assert post.image is None
    assert "<h2>1. Start with Clear Learning Objectives</h2>" in post.content


def test_get_blog_post_nonexistent_returns_none():
    assert get_blog_post("nonexistent") is None
    assert BlogService([]).get_blog_post("nonexistent") is None


def test_blooms_post_keeps_image_and_tags():
    post = get_blog_post("blooms-taxonomy-question-stems-guide")

    assert post.image.startswith("https://cdn.outrank.so/")
    assert post.tags[0] == "Bloom's Taxonomy"
    assert post.readingTime.endswith(" min")


def test_parse_post_file_converts_dates_and_reading_time(tmp_path):
    path = write_post(
        tmp_path,
        "01-hello.md",
        """
        ---
        slug: hello-world
        title: Hello World
        excerpt: First post
        date: 2026-02-01
        author: Someone
        tags: [one, two]
        ---
        <p>Just a few words here.</p>
        """,
    )

    post = parse_post_file(path)

    assert post.slug == "hello-world"
    assert post.date == "2026-02-01"
    assert post.tags == ["one", "two"]
    assert post.readingTime == "1 min"
    assert post.content == "<p>Just a few words here.</p>"


def test_parse_post_file_derives_slug_from_filename(tmp_path):
    path = write_post(
        tmp_path,
        "07-derived-slug.md",
        """
        ---
        title: Derived
        date: 2026-02-01
        ---
        body
        """,
    )
    assert parse_post_file(path).slug == "derived-slug"


def test_load_blog_posts_rejects_duplicate_slugs(tmp_path):
    body = """
    ---
    slug: same
    title: Same
    date: 2026-02-01
    ---
    body
    """
    write_post(tmp_path, "01-a.md", body)
    write_post(tmp_path, "02-b.md", body)

    with pytest.raises(ValueError, match="same"):
        load_blog_posts(tmp_path)


def test_load_blog_posts_uses_filename_order(tmp_path):
    for filename, slug in [("02-b.md", "b"), ("01-a.md", "a")]:
        write_post(
            tmp_path,
            filename,
            f"""
            ---
            slug: {slug}
            title: {slug}
            date: 2026-02-01
            ---
            body
            """,
        )

    assert [p.slug for p in load_blog_posts(tmp_path)] == ["a", "b"]


def test_strip_tags_and_reading_time():
    assert strip_tags("<p>one <strong>two</strong></p>").split() == ["one", "two"]
    assert calculate_reading_time("") == "1 min"
    assert calculate_reading_time("word " * 201) == "2 min"


def test_summary_drops_content():
    summary = make_post("x", "2026-01-01").summary()
    assert not hasattr(summary, "content")
    assert summary.slug == "x"
