"""CSS property tables: known names, units, groups and shorthand structure."""

from __future__ import annotations


def _names(block: str) -> frozenset[str]:
    return frozenset(block.split())


# ---------------------------------------------------------------------------
# Known properties
# ---------------------------------------------------------------------------

KNOWN_PROPERTIES = _names("""
    accent-color align-content align-items align-self alignment-baseline all
    anchor-name anchor-scope animation animation-composition animation-delay
    animation-direction animation-duration animation-fill-mode
    animation-iteration-count animation-name animation-play-state
    animation-range animation-range-end animation-range-start
    animation-timeline animation-timing-function appearance aspect-ratio
    backdrop-filter backface-visibility background background-attachment
    background-blend-mode background-clip background-color background-image
    background-origin background-position background-position-x
    background-position-y background-repeat background-size baseline-shift
    block-size border border-block border-block-color border-block-end
    border-block-end-color border-block-end-style border-block-end-width
    border-block-start border-block-start-color border-block-start-style
    border-block-start-width border-block-style border-block-width
    border-bottom border-bottom-color border-bottom-left-radius
    border-bottom-right-radius border-bottom-style border-bottom-width
    border-collapse border-color border-end-end-radius border-end-start-radius
    border-image border-image-outset border-image-repeat border-image-slice
    border-image-source border-image-width border-inline border-inline-color
    border-inline-end border-inline-end-color border-inline-end-style
    border-inline-end-width border-inline-start border-inline-start-color
    border-inline-start-style border-inline-start-width border-inline-style
    border-inline-width border-left border-left-color border-left-style
    border-left-width border-radius border-right border-right-color
    border-right-style border-right-width border-spacing
    border-start-end-radius border-start-start-radius border-style border-top
    border-top-color border-top-left-radius border-top-right-radius
    border-top-style border-top-width border-width bottom box-decoration-break
    box-shadow box-sizing break-after break-before break-inside caption-side
    caret-color clear clip clip-path clip-rule color color-interpolation
    color-interpolation-filters color-scheme column-count column-fill
    column-gap column-rule column-rule-color column-rule-style
    column-rule-width column-span column-width columns contain
    contain-intrinsic-block-size contain-intrinsic-height
    contain-intrinsic-inline-size contain-intrinsic-size
    contain-intrinsic-width container container-name container-type content
    content-visibility counter-increment counter-reset counter-set cursor cx
    cy d direction display dominant-baseline empty-cells field-sizing fill
    fill-opacity fill-rule filter flex flex-basis flex-direction flex-flow
    flex-grow flex-shrink flex-wrap float flood-color flood-opacity font
    font-family font-feature-settings font-kerning font-language-override
    font-optical-sizing font-palette font-size font-size-adjust font-stretch
    font-style font-synthesis font-variant font-variant-alternates
    font-variant-caps font-variant-east-asian font-variant-emoji
    font-variant-ligatures font-variant-numeric font-variant-position
    font-variation-settings font-weight forced-color-adjust gap grid
    grid-area grid-auto-columns grid-auto-flow grid-auto-rows grid-column
    grid-column-end grid-column-gap grid-column-start grid-gap grid-row
    grid-row-end grid-row-gap grid-row-start grid-template
    grid-template-areas grid-template-columns grid-template-rows
    hanging-punctuation height hyphenate-character hyphenate-limit-chars
    hyphens image-orientation image-rendering initial-letter inline-size
    inset inset-block inset-block-end inset-block-start inset-inline
    inset-inline-end inset-inline-start interpolate-size isolation
    justify-content justify-items justify-self left letter-spacing
    lighting-color line-break line-clamp line-height list-style
    list-style-image list-style-position list-style-type margin margin-block
    margin-block-end margin-block-start margin-bottom margin-inline
    margin-inline-end margin-inline-start margin-left margin-right
    margin-top marker marker-end marker-mid marker-start mask mask-border
    mask-clip mask-composite mask-image mask-mode mask-origin mask-position
    mask-repeat mask-size mask-type math-depth math-style max-block-size
    max-height max-inline-size max-width min-block-size min-height
    min-inline-size min-width mix-blend-mode object-fit object-position
    offset offset-anchor offset-distance offset-path offset-position
    offset-rotate opacity order orphans outline outline-color outline-offset
    outline-style outline-width overflow overflow-anchor overflow-block
    overflow-clip-margin overflow-inline overflow-wrap overflow-x overflow-y
    overscroll-behavior overscroll-behavior-block overscroll-behavior-inline
    overscroll-behavior-x overscroll-behavior-y padding padding-block
    padding-block-end padding-block-start padding-bottom padding-inline
    padding-inline-end padding-inline-start padding-left padding-right
    padding-top page page-break-after page-break-before page-break-inside
    paint-order perspective perspective-origin place-content place-items
    place-self pointer-events position position-anchor position-area
    position-try position-try-fallbacks position-try-order
    position-visibility print-color-adjust quotes r resize right rotate
    row-gap ruby-align ruby-position rx ry scale scroll-behavior
    scroll-margin scroll-margin-block scroll-margin-block-end
    scroll-margin-block-start scroll-margin-bottom scroll-margin-inline
    scroll-margin-inline-end scroll-margin-inline-start scroll-margin-left
    scroll-margin-right scroll-margin-top scroll-padding scroll-padding-block
    scroll-padding-block-end scroll-padding-block-start scroll-padding-bottom
    scroll-padding-inline scroll-padding-inline-end
    scroll-padding-inline-start scroll-padding-left scroll-padding-right
    scroll-padding-top scroll-snap-align scroll-snap-stop scroll-snap-type
    scroll-timeline scroll-timeline-axis scroll-timeline-name
    scrollbar-color scrollbar-gutter scrollbar-width shape-image-threshold
    shape-margin shape-outside shape-rendering stop-color stop-opacity
    stroke stroke-dasharray stroke-dashoffset stroke-linecap
    stroke-linejoin stroke-miterlimit stroke-opacity stroke-width tab-size
    table-layout text-align text-align-last text-anchor text-box
    text-box-edge text-box-trim text-combine-upright text-decoration
    text-decoration-color text-decoration-line text-decoration-skip-ink
    text-decoration-style text-decoration-thickness text-emphasis
    text-emphasis-color text-emphasis-position text-emphasis-style
    text-indent text-justify text-orientation text-overflow text-rendering
    text-shadow text-size-adjust text-transform text-underline-offset
    text-underline-position text-wrap text-wrap-mode text-wrap-style
    timeline-scope top touch-action transform transform-box transform-origin
    transform-style transition transition-behavior transition-delay
    transition-duration transition-property transition-timing-function
    translate unicode-bidi user-select vector-effect vertical-align
    view-timeline view-timeline-axis view-timeline-inset view-timeline-name
    view-transition-class view-transition-name visibility white-space
    white-space-collapse widows width will-change word-break word-spacing
    word-wrap writing-mode x y z-index zoom
    -webkit-appearance -webkit-box-orient -webkit-font-smoothing
    -webkit-line-clamp -webkit-tap-highlight-color -webkit-text-fill-color
    -webkit-text-stroke -webkit-text-stroke-color -webkit-text-stroke-width
    -webkit-overflow-scrolling -moz-osx-font-smoothing
""")

DEPRECATED_PROPERTIES = _names("""
    clip grid-gap grid-row-gap grid-column-gap page-break-after
    page-break-before page-break-inside word-wrap
""")


# ---------------------------------------------------------------------------
# Value units
# ---------------------------------------------------------------------------

UNITLESS_PROPERTIES = _names("""
    animation-iteration-count aspect-ratio border-image-outset
    border-image-slice border-image-width column-count fill-opacity flex
    flex-grow flex-shrink flood-opacity font-size-adjust font-weight
    grid-area grid-column grid-column-end grid-column-start grid-row
    grid-row-end grid-row-start initial-letter line-clamp line-height
    math-depth opacity order orphans scale shape-image-threshold
    stop-opacity stroke-dasharray stroke-dashoffset stroke-miterlimit
    stroke-opacity tab-size widows z-index zoom -webkit-line-clamp
""")

TIME_PROPERTIES = _names("""
    animation-delay animation-duration transition-delay transition-duration
""")

IDENTIFIER_LIST_PROPERTIES = _names("transition-property will-change")


# ---------------------------------------------------------------------------
# Priority groups
# ---------------------------------------------------------------------------

PRIORITY_GROUPS: list[tuple[str, frozenset[str]]] = [
    ("layout", _names("""
        display box-sizing visibility float clear overflow overflow-x
        overflow-y overflow-block overflow-inline overflow-anchor
        overflow-clip-margin contain content-visibility container
        container-name container-type isolation columns column-count
        column-width column-span column-fill table-layout
    """)),
    ("flexbox", _names("""
        flex flex-flow flex-direction flex-wrap flex-grow flex-shrink
        flex-basis order align-content align-items align-self
        justify-content justify-items justify-self place-content place-items
        place-self
    """)),
    ("grid", _names("""
        grid grid-area grid-template grid-template-areas
        grid-template-columns grid-template-rows grid-auto-columns
        grid-auto-flow grid-auto-rows grid-column grid-column-start
        grid-column-end grid-row grid-row-start grid-row-end gap row-gap
        column-gap grid-gap grid-row-gap grid-column-gap
    """)),
    ("box-size", _names("""
        width height min-width min-height max-width max-height inline-size
        block-size min-inline-size min-block-size max-inline-size
        max-block-size aspect-ratio contain-intrinsic-size
        contain-intrinsic-width contain-intrinsic-height
        contain-intrinsic-inline-size contain-intrinsic-block-size
        field-sizing interpolate-size
    """)),
    ("box-spacing", _names("""
        margin margin-block margin-block-start margin-block-end
        margin-inline margin-inline-start margin-inline-end margin-top
        margin-right margin-bottom margin-left padding padding-block
        padding-block-start padding-block-end padding-inline
        padding-inline-start padding-inline-end padding-top padding-right
        padding-bottom padding-left scroll-margin scroll-margin-block
        scroll-margin-block-start scroll-margin-block-end
        scroll-margin-inline scroll-margin-inline-start
        scroll-margin-inline-end scroll-margin-top scroll-margin-right
        scroll-margin-bottom scroll-margin-left scroll-padding
        scroll-padding-block scroll-padding-block-start
        scroll-padding-block-end scroll-padding-inline
        scroll-padding-inline-start scroll-padding-inline-end
        scroll-padding-top scroll-padding-right scroll-padding-bottom
        scroll-padding-left
    """)),
    ("position", _names("""
        position inset inset-block inset-block-start inset-block-end
        inset-inline inset-inline-start inset-inline-end top right bottom
        left z-index anchor-name anchor-scope position-anchor position-area
        position-try position-try-fallbacks position-try-order
        position-visibility
    """)),
    ("typography", _names("""
        font font-family font-size font-style font-weight font-variant
        font-stretch font-kerning font-feature-settings
        font-variation-settings font-optical-sizing font-synthesis
        font-size-adjust font-palette line-height letter-spacing
        word-spacing text-align text-align-last text-indent text-transform
        text-decoration text-decoration-line text-decoration-style
        text-decoration-thickness text-underline-offset
        text-underline-position text-overflow text-wrap text-wrap-mode
        text-wrap-style text-rendering text-shadow white-space
        white-space-collapse word-break overflow-wrap word-wrap hyphens
        hyphenate-character line-clamp vertical-align direction
        writing-mode unicode-bidi quotes content list-style list-style-type
        list-style-position list-style-image tab-size
    """)),
    ("color", _names("""
        color background background-color background-image
        background-position background-position-x background-position-y
        background-size background-repeat background-attachment
        background-clip background-origin background-blend-mode
        accent-color caret-color color-scheme fill stroke
        text-decoration-color text-emphasis-color forced-color-adjust
        print-color-adjust
    """)),
    ("border", _names("""
        border border-width border-style border-color border-top
        border-right border-bottom border-left border-block border-inline
        border-block-start border-block-end border-inline-start
        border-inline-end border-top-width border-right-width
        border-bottom-width border-left-width border-top-style
        border-right-style border-bottom-style border-left-style
        border-top-color border-right-color border-bottom-color
        border-left-color border-block-width border-block-style
        border-block-color border-inline-width border-inline-style
        border-inline-color border-block-start-width
        border-block-start-style border-block-start-color
        border-block-end-width border-block-end-style
        border-block-end-color border-inline-start-width
        border-inline-start-style border-inline-start-color
        border-inline-end-width border-inline-end-style
        border-inline-end-color border-radius border-top-left-radius
        border-top-right-radius border-bottom-right-radius
        border-bottom-left-radius border-start-start-radius
        border-start-end-radius border-end-start-radius
        border-end-end-radius border-image border-image-source
        border-image-slice border-image-width border-image-outset
        border-image-repeat border-collapse border-spacing outline
        outline-width outline-style outline-color outline-offset
    """)),
    ("effects", _names("""
        opacity box-shadow filter backdrop-filter mix-blend-mode
        transform transform-origin transform-style transform-box translate
        rotate scale perspective perspective-origin backface-visibility
        transition transition-property transition-duration
        transition-timing-function transition-delay transition-behavior
        animation animation-name animation-duration
        animation-timing-function animation-delay animation-iteration-count
        animation-direction animation-fill-mode animation-play-state
        animation-composition animation-timeline animation-range
        animation-range-start animation-range-end clip clip-path mask
        mask-image mask-size mask-position mask-repeat mask-origin
        mask-clip mask-composite mask-mode mask-type view-transition-name
        view-transition-class will-change
    """)),
    ("interactivity", _names("""
        cursor pointer-events user-select touch-action resize
        scroll-behavior scroll-snap-type scroll-snap-align scroll-snap-stop
        overscroll-behavior overscroll-behavior-x overscroll-behavior-y
        overscroll-behavior-block overscroll-behavior-inline
        scrollbar-width scrollbar-color scrollbar-gutter appearance
    """)),
]

GROUP_INDEX: dict[str, int] = {}
for _index, (_group, _props) in enumerate(PRIORITY_GROUPS):
    for _prop in _props:
        GROUP_INDEX.setdefault(_prop, _index)

MISC_GROUP = len(PRIORITY_GROUPS)


def group_of(prop: str) -> int:
    """Index of *prop*'s priority group; unlisted properties are misc."""
    return GROUP_INDEX.get(prop, MISC_GROUP)


# ---------------------------------------------------------------------------
# Shorthand structure
# ---------------------------------------------------------------------------

# Shorthands whose sub-properties are themselves shorthands.
SHORTHANDS_OF_SHORTHANDS = _names("""
    all animation-range background border border-block border-inline
    container font grid grid-area grid-template inset inset-block
    inset-inline margin mask mask-border outline padding scroll-margin
    scroll-padding text-decoration text-emphasis transition animation
    columns column-rule list-style flex flex-flow gap overflow
    overscroll-behavior place-content place-items place-self
""")

SHORTHANDS_OF_LONGHANDS = _names("""
    border-top border-right border-bottom border-left border-block-start
    border-block-end border-inline-start border-inline-end border-width
    border-style border-color border-radius border-block-width
    border-block-style border-block-color border-inline-width
    border-inline-style border-inline-color border-image grid-row
    grid-column grid-gap margin-block margin-inline padding-block
    padding-inline scroll-margin-block scroll-margin-inline
    scroll-padding-block scroll-padding-inline contain-intrinsic-size
    offset scroll-timeline view-timeline text-wrap white-space
    font-variant font-synthesis
""")

PHYSICAL_LONGHANDS = _names("""
    width height min-width min-height max-width max-height top right
    bottom left margin-top margin-right margin-bottom margin-left
    padding-top padding-right padding-bottom padding-left
    border-top-width border-right-width border-bottom-width
    border-left-width border-top-style border-right-style
    border-bottom-style border-left-style border-top-color
    border-right-color border-bottom-color border-left-color
    border-top-left-radius border-top-right-radius
    border-bottom-right-radius border-bottom-left-radius overflow-x
    overflow-y overscroll-behavior-x overscroll-behavior-y
    scroll-margin-top scroll-margin-right scroll-margin-bottom
    scroll-margin-left scroll-padding-top scroll-padding-right
    scroll-padding-bottom scroll-padding-left contain-intrinsic-width
    contain-intrinsic-height
""")


def _box(prefix: str, suffix: str = "") -> tuple[str, ...]:
    return tuple(f"{prefix}-{side}{suffix}" for side in ("top", "right", "bottom", "left"))


def _corners(prefix: str = "border") -> tuple[str, ...]:
    return tuple(
        f"{prefix}-{corner}-radius"
        for corner in ("top-left", "top-right", "bottom-right", "bottom-left")
    )


# Shorthand -> longhands.  Four-value box shorthands list their longhands in
# top/right/bottom/left order so the flatten policy can assign by position.
SHORTHAND_LONGHANDS: dict[str, tuple[str, ...]] = {
    "margin": _box("margin"),
    "padding": _box("padding"),
    "inset": ("top", "right", "bottom", "left"),
    "border-width": _box("border", "-width"),
    "border-style": _box("border", "-style"),
    "border-color": _box("border", "-color"),
    "border-radius": _corners(),
    "scroll-margin": _box("scroll-margin"),
    "scroll-padding": _box("scroll-padding"),
    "margin-block": ("margin-block-start", "margin-block-end"),
    "margin-inline": ("margin-inline-start", "margin-inline-end"),
    "padding-block": ("padding-block-start", "padding-block-end"),
    "padding-inline": ("padding-inline-start", "padding-inline-end"),
    "inset-block": ("inset-block-start", "inset-block-end"),
    "inset-inline": ("inset-inline-start", "inset-inline-end"),
    "scroll-margin-block": ("scroll-margin-block-start", "scroll-margin-block-end"),
    "scroll-margin-inline": ("scroll-margin-inline-start", "scroll-margin-inline-end"),
    "scroll-padding-block": ("scroll-padding-block-start", "scroll-padding-block-end"),
    "scroll-padding-inline": ("scroll-padding-inline-start", "scroll-padding-inline-end"),
    "gap": ("row-gap", "column-gap"),
    "overflow": ("overflow-x", "overflow-y"),
    "overscroll-behavior": ("overscroll-behavior-x", "overscroll-behavior-y"),
    "place-content": ("align-content", "justify-content"),
    "place-items": ("align-items", "justify-items"),
    "place-self": ("align-self", "justify-self"),
    "contain-intrinsic-size": ("contain-intrinsic-width", "contain-intrinsic-height"),
    "border": (
        "border-width", "border-style", "border-color",
        *_box("border", "-width"), *_box("border", "-style"), *_box("border", "-color"),
    ),
    "border-top": ("border-top-width", "border-top-style", "border-top-color"),
    "border-right": ("border-right-width", "border-right-style", "border-right-color"),
    "border-bottom": ("border-bottom-width", "border-bottom-style", "border-bottom-color"),
    "border-left": ("border-left-width", "border-left-style", "border-left-color"),
    "border-block": ("border-block-width", "border-block-style", "border-block-color"),
    "border-inline": ("border-inline-width", "border-inline-style", "border-inline-color"),
    "outline": ("outline-width", "outline-style", "outline-color"),
    "flex": ("flex-grow", "flex-shrink", "flex-basis"),
    "flex-flow": ("flex-direction", "flex-wrap"),
    "grid-row": ("grid-row-start", "grid-row-end"),
    "grid-column": ("grid-column-start", "grid-column-end"),
    "grid-area": ("grid-row-start", "grid-column-start", "grid-row-end", "grid-column-end"),
    "columns": ("column-width", "column-count"),
    "column-rule": ("column-rule-width", "column-rule-style", "column-rule-color"),
    "list-style": ("list-style-type", "list-style-position", "list-style-image"),
    "text-decoration": (
        "text-decoration-line", "text-decoration-style",
        "text-decoration-color", "text-decoration-thickness",
    ),
    "background": (
        "background-color", "background-image", "background-position",
        "background-size", "background-repeat", "background-attachment",
        "background-origin", "background-clip",
    ),
    "font": (
        "font-style", "font-variant", "font-weight", "font-stretch",
        "font-size", "line-height", "font-family",
    ),
    "transition": (
        "transition-property", "transition-duration",
        "transition-timing-function", "transition-delay", "transition-behavior",
    ),
    "animation": (
        "animation-name", "animation-duration", "animation-timing-function",
        "animation-delay", "animation-iteration-count", "animation-direction",
        "animation-fill-mode", "animation-play-state",
    ),
}

# Shorthands the flatten policy can split by position.
BOX_SHORTHANDS = frozenset({
    "margin", "padding", "inset", "border-width", "border-style",
    "border-color", "border-radius", "scroll-margin", "scroll-padding",
})

PAIR_SHORTHANDS = frozenset({
    "margin-block", "margin-inline", "padding-block", "padding-inline",
    "inset-block", "inset-inline", "scroll-margin-block",
    "scroll-margin-inline", "scroll-padding-block", "scroll-padding-inline",
    "gap", "overflow", "overscroll-behavior", "place-content",
    "place-items", "place-self", "contain-intrinsic-size",
})


def longhands_of(prop: str) -> tuple[str, ...]:
    return SHORTHAND_LONGHANDS.get(prop, ())


def is_shorthand(prop: str) -> bool:
    return prop in SHORTHAND_LONGHANDS


# ---------------------------------------------------------------------------
# Restricted definitions
# ---------------------------------------------------------------------------

POSITION_TRY_PROPERTIES = _names("""
    position-anchor position-area inset inset-block inset-block-start
    inset-block-end inset-inline inset-inline-start inset-inline-end top
    right bottom left margin margin-block margin-block-start
    margin-block-end margin-inline margin-inline-start margin-inline-end
    margin-top margin-right margin-bottom margin-left width height
    min-width min-height max-width max-height inline-size block-size
    min-inline-size min-block-size max-inline-size max-block-size
    align-self justify-self place-self
""")
