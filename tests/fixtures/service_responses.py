# ABOUTME: Canned Google Books, openBD, and NDL Search responses for testing.
# ABOUTME: Shapes match what each service returns for a found and a missing book.

GOOGLE_BOOKS_RESPONSE = {
    "kind": "books#volumes",
    "totalItems": 1,
    "items": [
        {
            "id": "abc123",
            "volumeInfo": {
                "title": "The Name of the Rose",
                "authors": ["Umberto Eco", "William Weaver"],
                "publisher": "Harcourt",
                "publishedDate": "1994-09-28",
                "description": "A mystery set in a medieval monastery.",
                "pageCount": 536,
                "categories": ["Fiction", "Mystery"],
                "imageLinks": {
                    "smallThumbnail": "http://books.google.com/small.jpg",
                    "thumbnail": "http://books.google.com/thumb.jpg",
                },
                "language": "en",
            },
        }
    ],
}

GOOGLE_BOOKS_SPARSE_RESPONSE = {
    "totalItems": 1,
    "items": [
        {
            "volumeInfo": {
                "title": "Sparse Book",
                "imageLinks": {"smallThumbnail": "http://books.google.com/small.jpg"},
            },
        }
    ],
}

GOOGLE_BOOKS_EMPTY_RESPONSE = {"kind": "books#volumes", "totalItems": 0}

OPENBD_RESPONSE = [
    {
        "onix": {
            "DescriptiveDetail": {
                "Subject": [
                    {"SubjectSchemeIdentifier": "78", "SubjectCode": "0093"},
                    {"SubjectHeadingText": "プログラミング"},
                    {"SubjectHeadingText": "コンピュータ"},
                ]
            }
        },
        "summary": {
            "isbn": "9784822283940",
            "title": "リーダブルコード",
            "volume": "",
            "series": "",
            "publisher": "オライリー・ジャパン",
            "pubdate": "201206",
            "cover": "https://cover.openbd.jp/9784822283940.jpg",
            "author": "Dustin Boswell／著 Trevor Foucher／著",
        },
    }
]

OPENBD_NOT_FOUND_RESPONSE = [None]

NDL_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<rss xmlns:dc="http://purl.org/dc/elements/1.1/" version="2.0">
  <channel>
    <title>NDL Search</title>
    <item>
      <title>吾輩は猫である</title>
      <author>夏目漱石 著</author>
      <dc:publisher>岩波書店</dc:publisher>
      <pubDate>Thu, 01 Jan 1990 00:00:00 +0900</pubDate>
      <description>長編小説</description>
    </item>
    <item>
      <title>Second item is ignored</title>
    </item>
  </channel>
</rss>
"""

NDL_EMPTY_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel><title>NDL Search</title></channel></rss>
"""
