"""Normalize HTML and highlight it next to its RSX form, zero deps."""

from html2rsx import code_block, highlight_html, highlight_rsx, normalize

html = '<div className="card">\n  <p>Hello   <b>world</b></p>\n</div>'
rsx = 'div { class: "card",\n    p { "Hello " b { "world" } }\n}'

print(normalize(html))
print(highlight_html(html))
print(highlight_rsx(rsx))
print(code_block(rsx, "rsx"))
