"""Tests for gridkit.grid: emitted declarations for each helper."""

import pytest
from gridkit import grid
from gridkit.breakpoints import UnknownBreakpointError
from gridkit.context import CompilationContext
from gridkit.css import AtRule, Declaration, QualifiedRule
from gridkit.ratio import InvalidSpecError, Keyword


def decls(block) -> dict[str, str]:
    return {c.name: c.value for c in block if isinstance(c, Declaration)}


@pytest.fixture
def ctx() -> CompilationContext:
    context = CompilationContext()
    context.register_breakpoint('md', 768, 720)
    return context


@pytest.fixture
def wrapper_ctx() -> CompilationContext:
    context = CompilationContext({'default_row_behavior': 'wrapper'})
    context.register_breakpoint('md', 768, 720)
    return context


class TestWrapper:
    def test_defaults(self, ctx: CompilationContext) -> None:
        assert decls(grid.wrapper(ctx)) == {
            'margin-left': 'auto',
            'margin-right': 'auto',
            'max-width': '1200px',
            'padding-left': '15px',
            'padding-right': '15px',
        }

    def test_full_has_no_max_width(self, ctx: CompilationContext) -> None:
        assert 'max-width' not in decls(grid.wrapper(ctx, 'full'))

    def test_collapse_has_no_padding(self, ctx: CompilationContext) -> None:
        assert 'padding-left' not in decls(grid.wrapper(ctx, 'collapse'))

    def test_max_width_override(self, ctx: CompilationContext) -> None:
        assert decls(grid.wrapper(ctx, max_width=960))['max-width'] == '960px'

    def test_clearfix(self, ctx: CompilationContext) -> None:
        nested = [c for c in grid.wrapper(ctx) if isinstance(c, QualifiedRule)]
        assert len(nested) == 1
        assert nested[0].prelude == '&::after'


class TestRow:
    def test_default_behavior(self, ctx: CompilationContext) -> None:
        assert decls(grid.row(ctx)) == {'margin-left': '-15px', 'margin-right': '-15px'}

    def test_collapse(self, ctx: CompilationContext) -> None:
        assert decls(grid.row(ctx, 'collapse')) == {'margin-left': '0', 'margin-right': '0'}

    def test_odd_gutter(self) -> None:
        context = CompilationContext({'gutter': 25})
        assert decls(grid.row(context))['margin-left'] == '-12.5px'

    def test_wrapper_behavior(self, wrapper_ctx: CompilationContext) -> None:
        assert grid.row_acts_as_wrapper(wrapper_ctx)
        assert decls(grid.row(wrapper_ctx)) == {
            'margin-left': 'auto',
            'margin-right': 'auto',
            'max-width': '1200px',
        }

    def test_wrapper_behavior_suppressed_in_media(self, wrapper_ctx: CompilationContext) -> None:
        with wrapper_ctx.media('md'):
            assert not grid.row_acts_as_wrapper(wrapper_ctx)
            block = decls(grid.row(wrapper_ctx))
        assert block == {'margin-left': '-15px', 'margin-right': '-15px'}

    @pytest.mark.parametrize('in_media', [False, True])
    def test_full_never_has_max_width(self, wrapper_ctx: CompilationContext, in_media: bool) -> None:
        if in_media:
            block = wrapper_ctx.with_active_media('md', lambda: grid.row(wrapper_ctx, 'full'))
        else:
            block = grid.row(wrapper_ctx, 'full')
        assert 'max-width' not in decls(block)

    def test_default_behavior_never_acts_as_wrapper(self, ctx: CompilationContext) -> None:
        assert not grid.row_acts_as_wrapper(ctx)
        assert 'max-width' not in decls(grid.row(ctx))


class TestColumn:
    def test_column_count(self, ctx: CompilationContext) -> None:
        assert decls(grid.column(ctx, 6)) == {
            'float': 'left',
            'width': '50%',
            'padding-left': '15px',
            'padding-right': '15px',
        }

    def test_keyword(self, ctx: CompilationContext) -> None:
        assert decls(grid.column(ctx, 'third'))['width'] == '33.3333333333%'

    def test_phrase(self, ctx: CompilationContext) -> None:
        assert decls(grid.column(ctx, '1 out of 4'))['width'] == '25%'

    def test_spec_value(self, ctx: CompilationContext) -> None:
        assert decls(grid.column(ctx, Keyword('quarter')))['width'] == '25%'

    def test_total_override(self, ctx: CompilationContext) -> None:
        assert decls(grid.column(ctx, 2, total=8))['width'] == '25%'

    def test_too_wide_saturates(self, ctx: CompilationContext) -> None:
        assert decls(grid.column(ctx, 20))['width'] == '100%'

    def test_right(self, ctx: CompilationContext) -> None:
        assert decls(grid.column(ctx, 4, 'right'))['float'] == 'right'

    def test_center(self, ctx: CompilationContext) -> None:
        block = decls(grid.column(ctx, 4, 'center'))
        assert block['float'] == 'none'
        assert block['margin-left'] == 'auto'
        assert block['margin-right'] == 'auto'

    def test_collapse(self, ctx: CompilationContext) -> None:
        assert 'padding-left' not in decls(grid.column(ctx, 4, 'collapse'))

    def test_invalid_width(self, ctx: CompilationContext) -> None:
        with pytest.raises(InvalidSpecError):
            grid.column(ctx, 'nonsense')


class TestOffsets:
    def test_offset(self, ctx: CompilationContext) -> None:
        assert decls(grid.offset(ctx, 3)) == {'margin-left': '25%'}

    def test_offset_right(self, ctx: CompilationContext) -> None:
        assert decls(grid.offset(ctx, 'half', 'right')) == {'margin-right': '50%'}

    def test_push(self, ctx: CompilationContext) -> None:
        assert decls(grid.push(ctx, '1/3')) == {'position': 'relative', 'left': '33.3333333333%'}

    def test_pull(self, ctx: CompilationContext) -> None:
        assert decls(grid.pull(ctx, 4)) == {'position': 'relative', 'right': '33.3333333333%'}


class TestMedia:
    def test_wraps_body(self, ctx: CompilationContext) -> None:
        rule = grid.media(ctx, 'md', lambda: grid.column(ctx, 6))
        assert isinstance(rule, AtRule)
        assert rule.name == 'media'
        assert rule.prelude == '(min-width: 768px)'
        assert decls(rule.block)['width'] == '50%'
        assert not ctx.active_media

    def test_body_sees_active_media(self, wrapper_ctx: CompilationContext) -> None:
        rule = grid.media(wrapper_ctx, 'md', lambda: grid.row(wrapper_ctx))
        assert decls(rule.block)['margin-left'] == '-15px'

    def test_unknown_prefix(self, ctx: CompilationContext) -> None:
        with pytest.raises(UnknownBreakpointError):
            grid.media(ctx, 'xxl', lambda: [])

    def test_body_error_propagates(self, ctx: CompilationContext) -> None:
        with pytest.raises(InvalidSpecError):
            grid.media(ctx, 'md', lambda: grid.column(ctx, 'nonsense'))
        assert not ctx.active_media


class TestBreakpoints:
    def test_one_rule_per_breakpoint_with_width(self, ctx: CompilationContext) -> None:
        ctx.register_breakpoint('xs', 0)
        ctx.register_breakpoint('lg', 992, 960)
        rules = grid.breakpoints(ctx)
        assert [r.prelude for r in rules] == ['(min-width: 768px)', '(min-width: 992px)']
        inner = rules[1].block[0]
        assert inner.prelude == '.wrapper'
        assert decls(inner.block) == {'max-width': '960px'}

    def test_duplicates_emitted_in_order(self) -> None:
        context = CompilationContext()
        context.register_breakpoint('sm', 768, 700)
        context.register_breakpoint('sm', 900, 800)
        rules = grid.breakpoints(context, '.container')
        assert [decls(r.block[0].block)['max-width'] for r in rules] == ['700px', '800px']
