"""
References:
    - [basics](https://developer.mozilla.org/en-US/docs/Learn/CSS/First_steps/How_CSS_is_structured)
    - [nesting](https://developer.chrome.com/articles/css-nesting/)
    - [@media](https://developer.mozilla.org/en-US/docs/Web/CSS/@media)

<ruleset>
    <selector/> <block>
        <property/>: <value/>;
        <nested-ruleset/>
        <at-rule/>
    </block>
</ruleset>
<at-rule/>
"""
from gridkit.css.rules import *
