"""Unit tests for seeding derivation from mentions."""

from macha.normalization.transformers import derive_seeding
from tests.notion_pages import mention_page


class TestDeriveSeeding:
    """Tests for one-entry-per-handle seeding derivation."""

    def test_dedupes_by_handle_in_first_seen_order(self, sample_mention_pages):
        """Handles a, b, a plus an empty handle yield entries a then b."""
        seeding = derive_seeding(sample_mention_pages)

        assert [entry.influencer.handle for entry in seeding] == ["a", "b"]

    def test_first_mention_is_representative(self, sample_mention_pages):
        """The first 'a' mention supplies id, name, thumbnail and post date."""
        entry = derive_seeding(sample_mention_pages)[0]

        assert entry.id == "m-1"
        assert entry.influencer.id == "m-1"
        assert entry.influencer.name == "Alice Kim"
        assert entry.influencer.thumbnail == "https://cdn.example.com/a1.jpg"
        assert entry.post_date == "2024-12-02"

    def test_name_falls_back_to_handle(self, sample_mention_pages):
        entry = derive_seeding(sample_mention_pages)[1]

        assert entry.influencer.name == "b"

    def test_thumbnail_placeholder(self, sample_mention_pages):
        entry = derive_seeding(sample_mention_pages)[1]

        assert entry.influencer.thumbnail == "https://via.placeholder.com/100"

    def test_custom_placeholder(self):
        seeding = derive_seeding([mention_page("m-1", "a")], placeholder_thumbnail="https://img/none.png")

        assert seeding[0].influencer.thumbnail == "https://img/none.png"

    def test_hosted_file_used_without_external_link(self):
        seeding = derive_seeding([mention_page("m-1", "a", hosted_thumbnail="https://s3/a.jpg")])

        assert seeding[0].influencer.thumbnail == "https://s3/a.jpg"

    def test_fixed_commercial_fields(self, sample_mention_pages):
        entry = derive_seeding(sample_mention_pages)[0]

        assert entry.model_dump(by_alias=True) == {
            "id": "m-1",
            "influencer": {
                "id": "m-1",
                "name": "Alice Kim",
                "handle": "a",
                "thumbnail": "https://cdn.example.com/a1.jpg",
                "followers": 0,
                "engagementRate": 0,
            },
            "type": "free",
            "status": "posted",
            "paymentAmount": 0,
            "productValue": 0,
            "notes": "",
            "requestDate": "",
            "postDate": "2024-12-02",
        }

    def test_pages_without_handle_are_dropped(self):
        pages = [mention_page("m-1"), mention_page("m-2", ""), mention_page("m-3", full_name="X")]

        assert derive_seeding(pages) == []

    def test_length_equals_distinct_handles(self):
        handles = ["x", "y", "x", "z", "y", "", "z", "w"]
        pages = [mention_page(f"m-{i}", handle) for i, handle in enumerate(handles)]

        seeding = derive_seeding(pages)

        assert [entry.influencer.handle for entry in seeding] == ["x", "y", "z", "w"]
        assert [entry.id for entry in seeding] == ["m-0", "m-1", "m-3", "m-7"]
