"""Shared test fixtures."""

import pytest

from discussion_threads.models.thread import Comment

HN_PAGE = """
<html><body><center><table id="hnmain"><tr><td>
<table class="fatitem">
  <tr class="athing submission" id="100">
    <td class="title"><span class="titleline"><a href="https://example.com/article">Example &amp; Article</a></span></td>
  </tr>
  <tr><td class="subtext"><span class="subline">
    <span class="score" id="score_100">42 points</span> by <a href="user?id=alice" class="hnuser">alice</a>
    <span class="age" title="2024-01-01T00:00:00"><a href="item?id=100">3 hours ago</a></span>
  </span></td></tr>
  <tr><td></td><td><div class="toptext">Root <i>text</i></div></td></tr>
</table>
<table class="comment-tree">
  <tr class="athing comtr" id="101"><td><table><tr>
    <td class="ind" indent="0"><img src="s.gif" height="1" width="0"></td>
    <td class="default">
      <span class="comhead"><a href="user?id=bob" class="hnuser">bob</a> <span class="age"><a>2 hours ago</a></span></span>
      <div class="comment"><div class="commtext c00">First <b>comment</b></div></div>
    </td>
  </tr></table></td></tr>
  <tr class="athing comtr" id="102"><td><table><tr>
    <td class="ind" indent="1"><img src="s.gif" height="1" width="40"></td>
    <td class="default">
      <span class="comhead"><a href="user?id=carol" class="hnuser">carol</a> <span class="age"><a>1 hour ago</a></span></span>
      <div class="comment"><div class="commtext c00">Reply to bob</div></div>
    </td>
  </tr></table></td></tr>
  <tr class="athing comtr" id="103"><td><table><tr>
    <td class="ind" indent="2"><img src="s.gif" height="1" width="80"></td>
    <td class="default">
      <span class="comhead"><a href="user?id=dave" class="hnuser">dave</a> <span class="age"><a>50 minutes ago</a></span></span>
      <div class="comment"><div class="commtext c00">Reply to carol</div></div>
    </td>
  </tr></table></td></tr>
  <tr class="athing comtr" id="104"><td><table><tr>
    <td class="ind" indent="1"><img src="s.gif" height="1" width="40"></td>
    <td class="default">
      <span class="comhead"><span class="age"><a>40 minutes ago</a></span> [flagged]</span>
      <div class="comment"><div class="commtext c00"></div></div>
    </td>
  </tr></table></td></tr>
  <tr class="athing comtr" id="106"><td><table><tr>
    <td class="ind" indent="2"><img src="s.gif" height="1" width="80"></td>
    <td class="default">
      <span class="comhead"><a href="user?id=fay" class="hnuser">fay</a> <span class="age"><a>30 minutes ago</a></span></span>
      <div class="comment"><div class="commtext c00">Reply to a flagged comment</div></div>
    </td>
  </tr></table></td></tr>
  <tr class="athing comtr" id="105"><td><table><tr>
    <td class="ind" indent="0"><img src="s.gif" height="1" width="0"></td>
    <td class="default">
      <span class="comhead"><a href="user?id=erin" class="hnuser">erin</a> <span class="age"><a>10 minutes ago</a></span></span>
      <div class="comment"><div class="commtext c00">Second top-level</div></div>
    </td>
  </tr></table></td></tr>
</table>
</td></tr></table></center></body></html>
"""

LOBSTERS_PAGE = """
<html><body>
<ol class="stories">
  <li id="story_abc123" class="story">
    <div class="story_liner"><div class="details">
      <span class="link"><a class="u-url" href="https://example.org/post">Lobsters Post</a></span>
      <div class="byline">
        <a href="/~frank"><img class="avatar" src="/avatars/frank.png" alt="frank avatar"></a>
        <a class="u-author" href="/~frank">frank</a>
        <time title="2024-02-02 10:00:00 -0600" datetime="2024-02-02T10:00:00-06:00">2 hours ago</time>
      </div>
    </div></div>
  </li>
</ol>
<div class="story_content"><div class="story_text"><p>Story <em>body</em></p></div></div>
<ol class="stories">
  <li id="story_comments">
    <ol class="comments comments1">
      <li class="comments_subtree"><div class="comment_form_container" data-shortid="formx"></div></li>
      <li class="comments_subtree">
        <div id="c_ga1" class="comment" data-shortid="ga1">
          <div class="details">
            <div class="byline">
              <a href="/~gina"><img class="avatar" src="/avatars/gina.png"></a>
              <a href="/~gina">gina</a>
              <time title="2024-02-02 11:00:00 -0600" datetime="2024-02-02T11:00:00-06:00">1 hour ago</time>
            </div>
            <div class="comment_text"><p>Top comment</p></div>
          </div>
        </div>
        <ol class="comments">
          <li class="comments_subtree">
            <div id="c_hb2" class="comment" data-shortid="hb2">
              <div class="details">
                <div class="byline"><a href="/~hank">hank</a> <time datetime="2024-02-02T11:30:00-06:00">30 minutes ago</time></div>
                <div class="comment_text"><p>Nested reply</p></div>
              </div>
            </div>
            <ol class="comments">
              <li class="comments_subtree">
                <div id="c_ic3" class="comment" data-shortid="ic3">
                  <div class="details">
                    <div class="byline"><a href="/~ivy">ivy</a> <time>just now</time></div>
                    <div class="comment_text"><p>Deep reply</p></div>
                  </div>
                </div>
              </li>
            </ol>
          </li>
        </ol>
      </li>
      <li class="comments_subtree">
        <div id="c_jd4" class="comment" data-shortid="jd4">
          <div class="details">
            <div class="byline"><a href="/~jo">jo</a></div>
            <div class="comment_text"><p>Another top comment</p></div>
          </div>
        </div>
      </li>
    </ol>
  </li>
</ol>
</body></html>
"""


@pytest.fixture
def nested_comments() -> tuple[Comment, ...]:
    """A two-root tree in nested shape."""
    return (
        Comment(
            id="1",
            author="alice",
            content="<p>one</p>",
            time="1 hour ago",
            depth=0,
            children=(
                Comment(
                    id="2",
                    author="bob",
                    content="<p>two</p>",
                    depth=1,
                    children=(Comment(id="3", author="carol", content="<p>three</p>", depth=2),),
                ),
            ),
        ),
        Comment(id="4", author="dave", content="<p>four</p>", time="5 minutes ago", depth=0),
    )


@pytest.fixture
def hn_page() -> str:
    """A Hacker News item page with one flagged comment."""
    return HN_PAGE


@pytest.fixture
def lobsters_page() -> str:
    """A Lobsters story page with a three-level reply chain."""
    return LOBSTERS_PAGE
