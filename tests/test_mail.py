"""
Tests for the Mail message object.
"""

from __future__ import annotations

import base64

import pytest

from mailbridge.mail import Attachment, Mail, TemplateBody


class TestMailConstruction:
    """Tests for Mail fields and accessors."""

    def test_defaults(self):
        mail = Mail()
        assert mail.to == ""
        assert mail.from_ == ""
        assert mail.subject == ""
        assert mail.body == ""
        assert mail.attachments == []
        assert mail.options == {}

    def test_accessors_round_trip(self):
        mail = Mail()
        mail.set_to(["a@b.com", "c@d.com"])
        mail.set_from("noreply@example.com")
        mail.set_subject("Hello")
        mail.set_body("World")
        mail.set_options({"html": True})
        assert mail.get_to() == ["a@b.com", "c@d.com"]
        assert mail.get_from() == "noreply@example.com"
        assert mail.get_subject() == "Hello"
        assert mail.get_body() == "World"
        assert mail.get_options() == {"html": True}

    def test_no_validation_on_empty_recipient(self):
        mail = Mail(to="", subject="x", body="y")
        assert mail.recipients() == []

    def test_options_are_copied(self):
        options = {"cc": ["x@y.com"]}
        mail = Mail(options=options)
        mail.options["bcc"] = ["z@y.com"]
        assert "bcc" not in options

    def test_repr(self):
        r = repr(Mail(to="a@b.com", subject="Hi"))
        assert "a@b.com" in r
        assert "Hi" in r


class TestMailBody:
    """Tests for string and template bodies."""

    def test_string_body(self):
        mail = Mail(body="Hello")
        assert mail.is_template() is False
        assert mail.get_body() == "Hello"

    def test_dict_body_becomes_template(self):
        mail = Mail(body={"view": "welcome.html", "data": {"a": 1}})
        body = mail.get_body()
        assert isinstance(body, TemplateBody)
        assert body.view == "welcome.html"
        assert body.data == {"a": 1}
        assert mail.is_template() is True

    def test_template_without_data_gets_empty_mapping(self):
        mail = Mail(body={"view": "plain.html"})
        assert mail.get_body().data == {}

    def test_template_data_none_gets_empty_mapping(self):
        mail = Mail(body={"view": "plain.html", "data": None})
        assert mail.get_body().data == {}

    def test_set_body_switches_kind(self):
        mail = Mail(body={"view": "x.html"})
        mail.set_body("now a string")
        assert mail.is_template() is False

    def test_template_body_instance_kept(self):
        body = TemplateBody(view="v.html", data={"k": "v"})
        mail = Mail(body=body)
        assert mail.get_body() is body


class TestMailRecipients:
    def test_single_address(self):
        assert Mail(to="a@b.com").recipients() == ["a@b.com"]

    def test_ordered_list(self):
        assert Mail(to=["x@a.com", "y@a.com"]).recipients() == ["x@a.com", "y@a.com"]

    def test_tuple_recipients(self):
        assert Mail(to=("x@a.com",)).recipients() == ["x@a.com"]


class TestMailAttachments:
    def test_attach_appends(self):
        mail = Mail()
        result = mail.attach("report.pdf", b"%PDF", "application/pdf")
        assert result is mail
        assert len(mail.attachments) == 1
        att = mail.attachments[0]
        assert att.name == "report.pdf"
        assert att.content == b"%PDF"
        assert att.content_type == "application/pdf"

    def test_constructor_accepts_mappings_and_tuples(self):
        mail = Mail(
            attachments=[
                {"filename": "a.txt", "content": "hello"},
                ("b.bin", b"\x00\x01", "application/octet-stream"),
                Attachment("c.csv", "x,y"),
            ]
        )
        names = [a.name for a in mail.get_attachments()]
        assert names == ["a.txt", "b.bin", "c.csv"]
        assert mail.attachments[1].content_type == "application/octet-stream"

    def test_unsupported_attachment_rejected(self):
        with pytest.raises(TypeError, match="Unsupported attachment 'int'"):
            Mail(attachments=[42])

    def test_set_attachments_rejects_unsupported(self):
        mail = Mail()
        with pytest.raises(TypeError):
            mail.set_attachments([b"raw bytes"])
        assert mail.attachments == []

    def test_content_bytes(self):
        assert Attachment("a.txt", "héllo").content_bytes == "héllo".encode("utf-8")
        assert Attachment("b.bin", b"\x00").content_bytes == b"\x00"

    def test_to_dict_encodes_bytes(self):
        data = Attachment("b.bin", b"\x00\x01").to_dict()
        assert data["content"] == base64.b64encode(b"\x00\x01").decode("ascii")
        assert data["name"] == "b.bin"
        assert data["content_type"] is None

    def test_to_dict_keeps_text(self):
        assert Attachment("a.txt", "plain").to_dict()["content"] == "plain"


class TestMailSnapshot:
    def test_to_dict_string_body(self):
        mail = Mail(to="a@b.com", from_="c@d.com", subject="Hi", body="Hello")
        data = mail.to_dict()
        assert data == {
            "to": "a@b.com",
            "from": "c@d.com",
            "subject": "Hi",
            "body": "Hello",
            "attachments": [],
            "options": {},
        }

    def test_to_dict_template_body(self):
        mail = Mail(body={"view": "w.html", "data": {"a": 1}})
        assert mail.to_dict()["body"] == {"view": "w.html", "data": {"a": 1}}
