"""Templates for the _sidebar.md file."""

# Comment added at the top and at the bottom of the generated sidebar
WARNING_TEMPLATE = """<!--
   Sidebar generated automatically by wikisidebar,
   don't update manually
   Last updated: {{ last_update }}
-->"""

SIDEBAR_MD_TEMPLATE = """{{ warning }}
<!-- markdownlint-disable MD033 -->

{{ content }}{{ warning }}
"""

# One accordion per folder; children are already indented
DIRECTORY_BLOCK_TEMPLATE = """{{ indent }}<details><!--{{ name }}-->
{{ indent }}   <summary>{{ summary }}</summary>
{{ indent }}   <blockquote>
{{ indent }}      <ul>
{{ children }}{{ indent }}      </ul>
{{ indent }}   </blockquote>
{{ indent }}</details>
"""

LINK_ITEM_TEMPLATE = """{{ indent }}<li>[{{ title }}]({{ link_target }})</li>
"""
