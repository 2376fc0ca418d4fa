"""End-to-end tests for story endpoints."""

from datetime import datetime, timezone


class TestGetStory:
    """End-to-end tests for GET /s/{short_url}/."""

    def test_story_with_ranked_comment_tree(self, api):
        """Roots scored 0, 5 and 2 come back best first; orphans are left out."""
        # Arrange
        store = api.store
        author = store.add_user("author")
        voters = [store.add_user(f"voter{i}") for i in range(5)]
        story = store.add_story(
            author, "A story", url="https://example.org", short_url="story1", tags=["news"]
        )
        other = store.add_story(author, "Another story")
        posted = datetime(2024, 1, 1, tzinfo=timezone.utc)
        store.add_comment(story, author, "zero", commented_at=posted)
        five = store.add_comment(story, author, "five", commented_at=posted, voters=voters)
        store.add_comment(story, author, "two", commented_at=posted, voters=voters[:2])
        store.add_comment(story, voters[0], "reply", parent=five)
        foreign = store.add_comment(other, author, "elsewhere")
        store.add_comment(story, author, "orphan", parent=foreign)

        # Act
        response = api.client.get("/s/story1/")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "A story"
        assert data["url"] == "https://example.org"
        assert data["tags"] == ["news"]
        assert [c["comment"] for c in data["comments"]] == ["five", "two", "zero"]
        assert data["comments"][0]["score"] == 5
        assert data["comments"][0]["children"][0]["comment"] == "reply"
        assert data["comments"][0]["children"][0]["username"] == "voter0"
        assert "orphan" not in response.text
        assert set(data["comments"][0]) == {
            "short_url",
            "commented_at",
            "comment",
            "comment_html",
            "username",
            "score",
            "children",
        }

    def test_viewing_marks_comments_read(self, api):
        store = api.store
        author = store.add_user("author")
        viewer = store.add_user("viewer")
        story = store.add_story(author, "A story", short_url="story1")
        comment = store.add_comment(story, author, "comment")

        api.login(viewer)
        response = api.client.get("/s/story1/")

        assert response.status_code == 200
        assert (viewer.id, comment.id) in store.read_comments

    def test_anonymous_view_marks_nothing(self, api):
        store = api.store
        author = store.add_user("author")
        story = store.add_story(author, "A story", short_url="story1")
        store.add_comment(story, author, "comment")

        response = api.client.get("/s/story1/")

        assert response.status_code == 200
        assert store.read_comments == set()

    def test_missing_story(self, api):
        response = api.client.get("/s/missing/")

        assert response.status_code == 404


class TestVoteStory:
    """End-to-end tests for POST /s/{short_url}/vote."""

    def test_vote_requires_authentication(self, api):
        author = api.store.add_user("author")
        api.store.add_story(author, "A story", short_url="story1")

        response = api.client.post("/s/story1/vote")

        assert response.status_code == 401

    def test_vote_toggles(self, api):
        store = api.store
        author = store.add_user("author")
        voter = store.add_user("voter")
        story = store.add_story(author, "A story", short_url="story1")
        api.login(voter)

        first = api.client.post("/s/story1/vote")
        assert first.status_code == 201
        assert (voter.id, story.id) in store.story_votes

        second = api.client.post("/s/story1/vote")
        assert second.status_code == 201
        assert (voter.id, story.id) not in store.story_votes

    def test_vote_on_missing_story(self, api):
        api.login(api.store.add_user("voter"))

        response = api.client.post("/s/missing/vote")

        assert response.status_code == 404


def test_health(api):
    response = api.client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
