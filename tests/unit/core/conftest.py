"""Shared sample documents for core unit tests"""

import pytest


VALID_DOC = """\
---
title: T
date: 2024-01-01
author: A
tags:
  - x
category: C
---

# Hi

Visit [site](http://example.com)."""

RICH_DOC = """\
---
title: Getting Started
date: 2024-03-15T10:30:00Z
author:
  name: Jane Doe
  email: jane@example.com
tags: guide
category: docs
description: A short tour.
draft: false
---

# Getting Started

Read the [install guide](https://example.com/install) first.

![diagram](https://example.com/diagram.png)

## Next *steps*

See <a href="https://example.com/api"><b>the API</b></a> or https://example.com/faq.
Use `mdindex convert` to try it!
"""

MISSING_AUTHOR_DOC = """\
---
title: No Author
date: 2024-01-01
tags: [a]
category: C
---

Body text.
"""


@pytest.fixture(name="valid_doc")
def valid_doc_fixture():
    return VALID_DOC


@pytest.fixture(name="rich_doc")
def rich_doc_fixture():
    return RICH_DOC


@pytest.fixture(name="missing_author_doc")
def missing_author_doc_fixture():
    return MISSING_AUTHOR_DOC
