"""Jinja2 source for the demo page.

Rendered by ``rocbuild.demo.page.render_page`` with autoescaping on; the
style, behavior and easter-egg payloads and the chrome glyphs are marked
``safe`` and inserted verbatim.
"""

from __future__ import annotations

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en" data-theme="dark">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ title }} — Icon Library</title>

<link rel="canonical" href="{{ site_url }}" />

<meta property="og:type" content="website" />
<meta property="og:url" content="{{ site_url }}" />
<meta property="og:title" content="{{ title }} — {{ name_count }} icons, {{ style_count }} styles" />
<meta property="og:description" content="Hand-crafted SVG icons in {{ style_list }} variants. Built for React and Svelte." />
<meta property="og:image" content="{{ site_url }}og-image.png" />
<meta property="og:image:width" content="1200" />
<meta property="og:image:height" content="630" />

<meta name="twitter:card" content="summary_large_image" />
<meta name="twitter:image" content="{{ site_url }}og-image.png" />
<meta name="twitter:image:alt" content="{{ title }} icon library — {{ name_count }} icons shown in {{ style_list }} styles on a dark background" />
<style>
{{ css|safe }}
</style>
</head>
<body>

<!-- header -->
<header class="page-header">
  <div class="page-header-left">
    <div class="logo-mark">
      <svg width="28" height="28" viewBox="0 0 24 24" fill="none" xmlns="http://www.w3.org/2000/svg">{{ logo_svg|safe }}</svg>
    </div>
    <div class="logo-text">
      <h1>{{ title }}</h1>
      <span class="logo-subtitle">Open-source icon toolkit</span>
    </div>
  </div>
  <div class="header-controls">
    <div class="search-bar">
      <svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round">{{ search_svg|safe }}</svg>
      <input class="search-input" id="search" type="text" placeholder="Search icons..." autocomplete="off">
    </div>
    <div class="header-divider" aria-hidden="true"></div>
    <div class="view-toggle">
      <label>View</label>
      <button class="view-btn active" data-view-mode="style" onclick="setViewMode('style')">By Style</button>
      <button class="view-btn" data-view-mode="category" onclick="setViewMode('category')">By Category</button>
    </div>
    <div class="header-divider" aria-hidden="true"></div>
    <div class="size-selector">
      <label>Size</label>
      <button class="size-btn" data-view="all" onclick="setView('all')">All</button>
      {%- for size in sizes %}
      <button class="size-btn{% if size == default_size %} active{% endif %}" data-view="{{ size }}" onclick="setView('{{ size }}')">{{ size }}</button>
      {%- endfor %}
    </div>
    <div class="header-divider" aria-hidden="true"></div>
    <div class="theme-toggle">
      <button id="btn-dark" class="active" onclick="setTheme('dark')" aria-label="Dark mode">
        <svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="1.5" stroke-linejoin="round">{{ moon_svg|safe }}</svg>
      </button>
      <button id="btn-light" onclick="setTheme('light')" aria-label="Light mode">
        <svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="1.5" stroke-linecap="round">{{ sun_svg|safe }}</svg>
      </button>
    </div>
    <span class="kbd header-kbd" title="Toggle theme">T</span>
    <div class="header-divider" aria-hidden="true"></div>
    <a href="{{ repo_url }}" class="github-link" target="_blank" rel="noopener noreferrer" aria-label="View on GitHub" title="View on GitHub">
      <svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round"><path d="M12 2.5C6.75 2.5 2.5 6.75 2.5 12c0 4.2 2.72 7.75 6.5 9 .47.09.65-.2.65-.46 0-.23-.01-.98-.01-1.78-2.65.58-3.2-1.13-3.2-1.13-.43-1.1-1.06-1.39-1.06-1.39-.87-.59.07-.58.07-.58.96.07 1.46.98 1.46.98.85 1.46 2.23 1.04 2.78.79.09-.62.33-1.04.6-1.28-2.12-.24-4.35-1.06-4.35-4.72 0-1.04.37-1.9.98-2.56-.1-.24-.43-1.21.09-2.53 0 0 .8-.26 2.63.98a9.14 9.14 0 0 1 4.8 0c1.83-1.24 2.63-.98 2.63-.98.52 1.32.19 2.29.1 2.53.61.67.98 1.52.98 2.56 0 3.67-2.24 4.48-4.37 4.71.34.3.65.88.65 1.77 0 1.28-.01 2.31-.01 2.63 0 .26.17.56.66.46 3.78-1.26 6.5-4.81 6.5-9 0-5.25-4.25-9.5-9.5-9.5Z"/></svg>
    </a>
  </div>
</header>

<!-- category bar -->
<div class="category-bar" id="category-bar">
  <button class="cat-btn active" data-cat="" onclick="setCat('')">All</button>
  {%- for category in categories %}
  <button class="cat-btn" data-cat="{{ category }}" onclick='setCat({{ category|tojson }})'>{{ category }}</button>
  {%- endfor %}
</div>

<!-- count bar -->
<div class="count-bar" id="count-bar">
  <span class="icon-count" id="icon-count"></span>
</div>

<!-- content -->
<main class="page-content" id="content"></main>

<div class="toast" id="toast">SVG copied</div>

<div class="detail-backdrop" id="detail-backdrop"></div>
<div class="detail-panel" id="detail-panel"></div>

<!-- footer -->
<footer class="page-footer">
  <div class="footer-stats">
    <span class="footer-stat"><span class="footer-dot"></span> <span id="footer-count">{{ name_count }} icons</span></span>
    <span class="footer-stat">{{ style_count }} styles</span>
    <span class="footer-stat">{{ size_count }} sizes</span>
  </div>
  <span>Press <span class="kbd">/</span> to search · <span class="kbd">T</span> toggle theme</span>
</footer>

<script>
{{ data_block|safe }}
{{ app_js|safe }}
</script>
<script>
{{ disco_js|safe }}
</script>
</body>
</html>
"""
