"""Syntax definitions for assembly, C, Caddyfile, CMake, C++, C# and D."""

from __future__ import annotations

import functools

import yaml

_ESCAPE = r"\\."
_SPECIAL = ("constant.specialChar", _ESCAPE)
_TODO = ("todo", "(TODO|XXX|FIXME):?")


def _alt(words: str) -> str:
    """Join whitespace-separated alternatives into one capturing group."""
    return "(" + "|".join(words.split()) + ")"


def _words(words: str) -> str:
    """Match any of the given words on word boundaries."""
    return r"\b" + _alt(words) + r"\b"


def _ci(words: str) -> str:
    """Match any of the given words case-insensitively on word boundaries."""
    return r"\b(?i)" + _alt(words) + r"(?-i)\b"


def _numbered(prefix: str, stop: int, start: int = 0) -> str:
    return " ".join(f"{prefix}{n}" for n in range(start, stop))


def _region(start: str, end: str, *rules: tuple, skip: str | None = None) -> dict:
    region: dict = {"start": start, "end": end}
    if skip is not None:
        region["skip"] = skip
    region["rules"] = [{group: value} for group, value in rules]
    return region


def _quoted(quote: str, *rules: tuple, skip: str | None = _ESCAPE) -> tuple:
    return ("constant.string", _region(quote, quote, *rules, skip=skip))


def _document(filetype: str, rules: list) -> str:
    data = {"filetype": filetype, "rules": [{group: value} for group, value in rules]}
    return yaml.safe_dump(data, sort_keys=False, width=1 << 16)


_ASM_STATEMENTS = (
    "mov aaa aad aam aas adc add and call cbw clc cld cli cmc cmp cmpsb cmpsw cwd daa das "
    "dec div esc hlt idiv imul in inc int into iret ja jae jb jbe jc je jg jge jl jle jna "
    "jnae jnb jnbe jnc jne jng jnge jnl jnle jno jnp jns jnz jo jp jpe jpo js jz jcxz jmp "
    "lahf lds lea les lock lodsb lodsw loop loope loopne loopnz loopz movsb movsw mul neg "
    "nop or pop popf push pushf rcl rcr rep repe repne repnz repz ret retn retf rol ror "
    "sahf sal sar sbb scasb scasw shl shr stc std sti stosb stosw sub test wait xchg xlat xor",
    "bound enter ins leave outs popa pusha",
    "arpl clts lar lgdt lidt lldt lmsw loadall lsl ltr sgdt sidt sldt smsw str verr verw",
    "bsf bsr bt btc btr bts cdq cmpsd cwde insd iret iretd iretf jecxz lfs lgs lss lodsd "
    "loopw loopew loopnew loopnzw loopzw loopd looped loopned loopnzd loopzd cr tr dr "
    "movsd movsx movzx outsd popad popfd pushad pushfd scasd seta setae setb setbe setc "
    "sete setg setge setl setle setna setnae setnb setnbe setnc setne setng setnge setnl "
    "setnle setno setnp setns setnz seto setp setpe setpo sets setz shdl shrd stosd",
    "bswap cmpxcgh invd invlpg wbinvd xadd",
    "cpuid cmpxchg8b rdmsr rdtsc wrmsr rsm",
    "rdpmc",
    "syscall sysret",
    "cmova cmovae cmovb cmovbe cmovc cmove cmovg cmovge cmovl cmovle cmovna cmovnae cmovnb "
    "cmovnbe cmovnc cmovne cmovng cmovnge cmovnle cmovno cmovpn cmovns cmovnz cmovo cmovp "
    "cmovpe cmovpo cmovs cmovz sysenter sysexit ud2",
    "maskmovq movntps movntq prefetch0 prefetch1 prefetch2 prefetchnta sfence",
    "clflush lfence maskmovdqu mfence movntdq movnti movntpd pause",
    "monitor mwait",
    "cdqe cqo cmpsq cmpxchg16b iretq jrcxz lodsq movsdx popfq pushfq rdtscp scasq stosq swapgs",
    "clgi invlpga skinit stgi vmload vmmcall vmrun vmsave",
    "vmptrdl vmptrst vmclear vmread vmwrite vmcall vmlaunch vmresume vmxoff vmxon",
    "lzcnt popcnt",
    "bextr blcfill blci blcic blcmask blcs blsfill blsic t1mskc tzmsk",
    "f2xm1 fabs fadd faddp fbld fbstp fchs fclex fcom fcomp fcompp fdecstp fdisi fdiv fvidp "
    "fdivr fdivrp feni ffree fiadd ficom ficomp fidiv fidivr fild fimul fincstp finit fist "
    "fistp fisub fisubr fld fld1 fldcw fldenv fldenvw fldl2e fldl2t fldlg2 fldln2 fldpi fldz "
    "fmul fmulp fnclex fndisi fneni fninit fnop fnsave fnsavenew fnstcw fnstenv fnstenvw "
    "fnstsw fpatan fprem fptan frndint frstor frstorw fsave fsavew fscale fsqrt fst fstcw "
    "fstenv fstenvw fstp fstpsw fsub fsubp fsubr fsubrp ftst fwait fxam fxch fxtract fyl2x fyl2xp1",
    "fsetpm",
    "fcos fldenvd fsaved fstenvd fprem1 frstord fsin fsincos fstenvd fucom fucomp fucompp",
    "fcmovb fcmovbe fcmove fcmove fcmovnb fcmovnbe fcmovne fcmovnu fcmovu",
    "fcomi fcomip fucomi fucomip",
    "fxrstor fxsave",
    "fisttp",
    "ffreep",
    "emms movd movq packssdw packsswb packuswb paddb paddw paddd paddsb paddsw paddusb "
    "paddusw pand pandn por pxor pcmpeqb pcmpeqw pcmpeqd pcmpgtb pcmpgtw pcmpgtd pmaddwd "
    "pmulhw pmullw psllw pslld psllq psrad psraw psrlw psrld psrlq psubb psubw psubd psubsb "
    "psubsw psubusb punpckhbw punpckhwd punpckhdq punkcklbw punpckldq punpcklwd",
    "paveb paddsiw pmagw pdistib psubsiw pmwzb pmulhrw pmvnzb pmvlzb pmvgezb pmulhriw pmachriw",
    "femms pavgusb pf2id pfacc pfadd pfcmpeq pfcmpge pfcmpgt pfmax pfmin pfmul pfrcp "
    "pfrcpit1 pfrcpit2 pfrsqit1 pfrsqrt pfsub pfsubr pi2fd pmulhrw prefetch prefetchw",
    "pf2iw pfnacc pfpnacc pi2fw pswapd",
    "pfrsqrtv pfrcpv",
    "addps addss cmpps cmpss comiss cvtpi2ps cvtps2pi cvtsi2ss cvtss2si cvttps2pi cvttss2si "
    "divps divss ldmxcsr maxps maxss minps minss movaps movhlps movhps movlhps movlps "
    "movmskps movntps movss movups mulps mulss rcpps rcpss rsqrtps rsqrtss shufps sqrtps "
    "sqrtss stmxcsr subps subss ucomiss unpckhps unpcklps",
    "andnps andps orps pavgb pavgw pextrw pinsrw pmaxsw pmaxub pminsw pminub pmovmskb "
    "pmulhuw psadbw pshufw xorps",
    "movups movss movlps movhlps movlps unpcklps unpckhps movhps movlhps prefetchnta "
    "prefetch0 prefetch1 prefetch2 nop movaps cvtpi2ps cvtsi2ss cvtps2pi cvttss2si cvtps2pi "
    "cvtss2si ucomiss comiss sqrtps sqrtss rsqrtps rsqrtss rcpps andps orps xorps addps "
    "addss mulps mulss subps subss minps minss divps divss maxps maxss pshufw ldmxcsr "
    "stmxcsr sfence cmpps cmpss pinsrw pextrw shufps pmovmskb pminub pmaxub pavgb pavgw "
    "pmulhuw movntq pminsw pmaxsw psadbw maskmovq",
    "addpd addsd addnpd cmppd cmpsd",
    "addpd addsd andnpd andpd cmppd cmpsd comisd cvtdq2pd cvtdq2ps cvtpd2dq cvtpd2pi "
    "cvtpd2ps cvtpi2pd cvtps2dq cvtps2pd cvtsd2si cvtsd2ss cvtsi2sd cvtss2sd cvttpd2dq "
    "cvttpd2pi cvttps2dq cvttsd2si divpd divsd maxpd maxsd minpd minsd movapd movhpd movlpd "
    "movmskpd movsd movupd mulpd mulsd orpd shufpd sqrtpd sqrtsd subpd subsd ucomisd "
    "unpckhpd unpcklpd xorpd",
    "movdq2q movdqa movdqu movq2dq paddq psubq pmuludq pshufhw pshuflw pshufd pslldq "
    "psrldq punpckhqdq punpcklqdq",
    "addsubpd addsubps haddpd haddps hsubpd hsubps movddup movshdup movsldu",
    "lddqu",
    "psignw psignd psignb pshufb pmulhrsw pmaddubsw phsubw phsubsw phsubd phaddw phaddsw "
    "phaddd palignr pabsw pabsd pabsb",
    "dpps dppd blendps blendpd blendvps blendvpd roundps roundss roundpd roundsd insertps extractps",
    "mpsadbw phminposuw pmulld pmuldq pblendvb pblendw pminsb pmaxsb pminuw pmaxuw pminud "
    "pmaxud pminsd pmaxsd pinsrb pinsrd/pinsrq pextrb pextrw pextrd/pextrq pmovsxbw "
    "pmovzxbw pmovsxbd pmovzxbd pmovsxbq pmovzxbq pmovsxwd pmovzxwd pmovsxwq pmovzxwq "
    "pmovsxdq pmovzxdq ptest pcmpeqq packusdw movntdqa",
    "extrq insertq movntsd movntss",
    "crc32 pcmpestri pcmpestrm pcmpistri pcmpistrm pcmpgtq",
    "vfmaddpd vfmaddps vfmaddsd vfmaddss vfmaddsubpd vfmaddsubps vfmsubaddpd vfmsubaddps "
    "vfmsubpd vfmsubps vfmsubsd vfmsubss vfnmaddpd vfnmaddps vfnmaddsd vfnmaddss vfnmsubps "
    "vfnmsubsd vfnmsubss",
    "aesenc aesenclast aesdec aesdeclast aeskeygenassist aesimc",
    "sha1rnds4 sha1nexte sha1msg1 sha1msg2 sha256rnds2 sha256msg1 sha256msg2",
    "aam aad salc icebp loadall loadalld ud1",
)

_ASM_REGISTERS = (
    "al ah bl bh cl ch dl dh bpl sil r8b r9b r10b r11b dil spl r12b r13b r14b r15",
    "cw sw tw fp_ds fp_opc fp_ip fp_dp fp_cs cs ss ds es fs gs gdtr idtr tr ldtr ax bx cx "
    "dx bp si r8w r9w r10w r11w di sp r12w r13w r14w r15w ip",
    "fp_dp fp_ip eax ebx ecx edx ebp esi r8d r9d r10d r11d edi esp r12d r13d r14d r15d eip "
    "eflags mxcsr",
    " ".join(
        [
            _numbered("mm", 8),
            "rax rbx rcx rdx rbp rsi r8 r9 r10 r11 rdi rsp r12 r13 r14 r15 rip rflags",
            _numbered("cr", 16),
            "msw dr0 dr1 dr2 dr3 r4",
            _numbered("dr", 16, 5),
        ]
    ),
    _numbered("st", 8),
    _numbered("xmm", 16),
    _numbered("ymm", 16),
    _numbered("zmm", 32),
)

_ASM_RULES = [
    *(("statement", _ci(words)) for words in _ASM_STATEMENTS),
    *(("identifier", _ci(words)) for words in _ASM_REGISTERS),
    ("constant.number", r"\b(|h|A|0x)+[0-9]+(|h|A)+\b"),
    ("constant.number", r"\b0x[0-9 a-f A-F]+\b"),
    ("preproc", r"%+(\+|\?|\?\?|)[a-z A-Z 0-9]+"),
    ("preproc", r"%\[[. a-z A-Z 0-9]*\]"),
    ("statement", _ci(r"extern global section segment _start \.text \.data \.bss")),
    ("statement", _ci("db dw dd dq dt ddq do")),
    ("identifier", "[a-z A-Z 0-9 _]+:"),
    _quoted('"', _SPECIAL),
    _quoted("'", _SPECIAL),
    ("comment", _region(";", "$", _TODO)),
]

_C_CONSTANT_IDENTIFIER = r"\b[A-Z_][0-9A-Z_]+\b"
_C_SIZED_TYPES = r"\b((s?size)|((u_?)?int(8|16|32|64|ptr)))_t\b"
_C_PREPROC = (
    r"^[[:space:]]*#[[:space:]]*(define|pragma|include|(un|ifn?)def|endif|el(if|se)|if|warning|error)"
)
_C_CHAR = r"""'([^'\\]|(\\["'abfnrtv\\]))'"""
_C_OCTAL_CHAR = r"'\\(([0-3]?[0-7]{1,2}))'"
_C_HEX_CHAR = r"'\\x[0-9A-Fa-f]{1,2}'"
_C_ATTRIBUTE = r"__attribute__[[:space:]]*\(\([^)]*\)\)"
_C_DUNDER = "__" + _alt("aligned asm builtin hidden inline packed restrict section typeof weak") + "__"
_C_OPERATORS = r"([.:;,+*|=!\%]|<|>|/|-|&)"
_C_BRACKETS = r"[(){}]|\[|\]"
_C_NUMBERS = r"(\b[0-9]+\b|\b0x[0-9A-Fa-f]+\b)"
_C_CONTROL = [
    ("statement", _words("for if while do else case default switch")),
    ("statement", _words("try throw catch operator new delete")),
    ("statement", _words("goto continue break return")),
]
_C_STRINGS = [_quoted('"', _SPECIAL), _quoted("'", ("preproc", "..+"), _SPECIAL)]
_C_COMMENTS = [
    ("comment", _region("//", "$", _TODO)),
    ("comment", _region(r"/\*", r"\*/", _TODO)),
]

_C_RULES = [
    ("identifier", _C_CONSTANT_IDENTIFIER),
    ("statement", r"([a-zA-Z][a-zA-Z0-9_]*)[[:space:]]*\("),
    (
        "type",
        _words(
            "float double char bool int short long sizeof enum void static const struct "
            "union typedef extern (un)?signed inline"
        ),
    ),
    ("type", _C_SIZED_TYPES),
    ("statement", _words("typename mutable volatile register explicit")),
    *_C_CONTROL,
    ("preproc", _C_PREPROC),
    ("constant", _C_CHAR),
    ("constant", _C_OCTAL_CHAR),
    ("constant", _C_HEX_CHAR),
    ("statement", _C_ATTRIBUTE),
    ("statement", _C_DUNDER),
    ("symbol.operator", _C_OPERATORS),
    ("symbol.brackets", _C_BRACKETS),
    ("constant.number", _C_NUMBERS),
    ("constant.number", "NULL"),
    *_C_STRINGS,
    *_C_COMMENTS,
]

_CADDYFILE_RULES = [
    ("identifier", r"^\s*\S+(\s|$)"),
    ("type", r"^([\w.:/-]+,? ?)+[,{]$"),
    ("constant.specialChar", r"\s{$"),
    ("constant.specialChar", r"^\s*}$"),
    _quoted('"', _SPECIAL),
    ("preproc", r"\{(\w+|\$\w+|%\w+%)\}"),
    ("comment", _region("#", "$")),
]

_CMAKE_RULES = [
    ("identifier.var", "^[[:space:]]*[A-Z0-9_]+"),
    ("preproc", r"^[[:space:]]*(include|include_directories|include_external_msproject)\b"),
    ("statement", r"^[[:space:]]*\b((else|end)?if|else|(end)?while|(end)?foreach|break)\b"),
    (
        "statement",
        _words("COPY NOT COMMAND PROPERTY POLICY TARGET EXISTS IS_(DIRECTORY|ABSOLUTE) DEFINED")
        + "[[:space:]]",
    ),
    (
        "statement",
        "[[:space:]]"
        + _words("OR AND IS_NEWER_THAN MATCHES (STR|VERSION_)?(LESS|GREATER|EQUAL)")
        + "[[:space:]]",
    ),
    ("special", r"^[[:space:]]*\b((end)?(function|macro)|return)"),
    _quoted('"', _SPECIAL),
    _quoted("'", _SPECIAL),
    ("preproc", _region(r"\$(\{|ENV\{)", r"\}")),
    ("identifier.macro", _words("APPLE UNIX WIN32 CYGWIN BORLAND MINGW MSVC(_IDE|60|71|80|90)?")),
    ("comment", _region("#", "$", _TODO)),
]

_CPP_RULES = [
    ("identifier", _C_CONSTANT_IDENTIFIER),
    (
        "type",
        _words(
            "auto float double bool char int short long sizeof enum void static const "
            "constexpr struct union typedef extern (un)?signed inline"
        ),
    ),
    ("type", _C_SIZED_TYPES),
    (
        "statement",
        _words(
            "class namespace template public protected private typename this friend virtual "
            "using mutable volatile register explicit"
        ),
    ),
    *_C_CONTROL,
    ("preproc", _C_PREPROC),
    ("constant", "(" + "|".join((_C_CHAR, _C_OCTAL_CHAR, _C_HEX_CHAR)) + ")"),
    ("statement", "(" + _C_ATTRIBUTE + "|" + _C_DUNDER + ")"),
    ("symbol.operator", _C_OPERATORS),
    ("symbol.brackets", _C_BRACKETS),
    ("constant.number", _C_NUMBERS),
    ("constant.bool", r"(\b(true|false)\b|NULL)"),
    *_C_STRINGS,
    *_C_COMMENTS,
]

_CSHARP_ESCAPES = (
    ("constant.specialChar", r"""\\([btnfr]|'|\"|\\)"""),
    ("constant.specialChar", r"\\u[A-Fa-f0-9]{4}"),
)

_CSHARP_RULES = [
    ("identifier.macro", "class +[A-Za-z0-9]+ *((:) +[A-Za-z0-9.]+)?"),
    ("identifier.var", "@[A-Za-z]+"),
    ("identifier", "[A-Za-z_][A-Za-z0-9_]*[[:space:]]*[()]"),
    (
        "type",
        _words(
            "bool byte sbyte char decimal double float IntPtr int uint long ulong object "
            "short ushort string base this var void"
        ),
    ),
    (
        "statement",
        _words(
            "alias as case catch checked default do dynamic else finally fixed for foreach "
            "goto if is lock new null return switch throw try unchecked while"
        ),
    ),
    (
        "statement",
        _words(
            "abstract async class const delegate enum event explicit extern get implicit in "
            "internal interface namespace operator out override params partial private "
            "protected public readonly ref sealed set sizeof stackalloc static struct typeof "
            "unsafe using value virtual volatile yield"
        ),
    ),
    (
        "statement",
        _words("from where select group info orderby join let in on equals by ascending descending"),
    ),
    ("special", _words("break continue")),
    ("constant.bool", _words("true false")),
    ("symbol.operator", r"[\-+/*=<>?:!~%&|]"),
    ("constant.number", r"\b([0-9._]+|0x[A-Fa-f0-9_]+|0b[0-1_]+)[FL]?\b"),
    _quoted('"', *_CSHARP_ESCAPES),
    _quoted("'", *_CSHARP_ESCAPES),
    *_C_COMMENTS,
]

_D_INT_SUFFIX = "(L[uU]?|[uU]L?)?"
_D_DECIMAL = "([0-9][0-9_]*)"
_D_EXPONENT = "([eE][+-]?" + _D_DECIMAL + ")"
_D_FLOAT_SUFFIX = "[fFL]?i?"
_D_HEX = "([0-9a-fA-F][0-9a-fA-F_]*|[0-9a-fA-F_]*[0-9a-fA-F])"

_D_RULES = [
    ("statement", r"(\*|/|%|\+|-|>>|<<|>>>|&|\^(\^)?|\||~)?="),
    ("statement", r"\.\.(\.)?|!|\*|&|~|\(|\)|\[|\]|\\|/|\+|-|%|<|>|\?|:|;"),
    ("error", "(0[0-7_]*)" + _D_INT_SUFFIX),
    ("constant.number", "([0-9]|[1-9][0-9_]*)" + _D_INT_SUFFIX),
    ("constant", "(0[bB][01_]*)" + _D_INT_SUFFIX),
    ("constant.number", r"[0-9][0-9_]*\." + _D_DECIMAL + _D_EXPONENT + "?" + _D_FLOAT_SUFFIX),
    ("constant.number", "[0-9][0-9_]*" + _D_EXPONENT + _D_FLOAT_SUFFIX),
    ("constant.number", r"[^.]\." + _D_DECIMAL + _D_EXPONENT + "?" + _D_FLOAT_SUFFIX),
    ("constant.number", "[0-9][0-9_]*([fFL]?i|[fF])"),
    ("constant.number", "(0[xX]" + _D_HEX + ")" + _D_INT_SUFFIX),
    (
        "constant.number",
        "0[xX]"
        + _D_HEX
        + r"(\.[0-9a-fA-F][0-9a-fA-F_]*|[0-9a-fA-F_]*[0-9a-fA-F])?[pP][+-]?"
        + _D_DECIMAL
        + _D_FLOAT_SUFFIX,
    ),
    ("constant.number", r"0[xX]\." + _D_HEX + "[pP][+-]?" + _D_DECIMAL + _D_FLOAT_SUFFIX),
    _quoted("'", _SPECIAL, skip=None),
    (
        "statement",
        _words(
            "abstract alias align asm assert auto body break case cast catch class const "
            "continue debug default delegate do else enum export extern"
        ),
    ),
    (
        "statement",
        _words(
            "false final finally for foreach foreach_reverse function goto if immutable "
            "import in inout interface invariant is lazy"
        ),
    ),
    (
        "statement",
        _words(
            "macro mixin module new nothrow null out override package pragma private "
            "protected public pure ref return"
        ),
    ),
    (
        "statement",
        _words(
            "scope shared static struct super switch synchronized template this throw true "
            "try typeid typeof union unittest version while with"
        ),
    ),
    (
        "statement",
        _words(
            "__FILE__ __MODULE__ __LINE__ __FUNCTION__ __PRETTY_FUNCTION__ __gshared "
            "__traits __vector __parameters"
        ),
    ),
    ("error", _words("delete deprecated typedef volatile")),
    (
        "type",
        _words(
            "bool byte cdouble cent cfloat char creal dchar double float idouble ifloat int "
            "ireal long real short ubyte ucent uint ulong ushort void wchar"
        ),
    ),
    ("type", _words("string wstring dstring size_t ptrdiff_t")),
    ("constant", _words("__DATE__ __EOF__ __TIME__ __TIMESTAMP__ __VENDOR__ __VERSION__")),
    _quoted('"', _SPECIAL),
    ("constant.string", _region('r"', '"', _SPECIAL)),
    _quoted("`", _SPECIAL, skip=None),
    ("constant.string", _region('x"', '"', _SPECIAL)),
    ("constant.string", _region(r'q"\(', r'\)"', _SPECIAL)),
    ("constant.string", _region(r'q"\{', r'q"\}', _SPECIAL)),
    ("constant.string", _region(r'q"\[', r'q"\]', _SPECIAL)),
    ("constant.string", _region('q"<', 'q">', _SPECIAL)),
    ("constant.string", _region(r'q"[^({[<"][^"]*$', r'^[^"]+"', _SPECIAL)),
    ("constant.string", _region(r'q"([^({[<"])', '"', _SPECIAL)),
    ("comment", _region("//", "$")),
    ("comment", _region(r"/\*", r"\*/")),
    ("comment", _region(r"/\+", r"\+/")),
]

_LANGUAGES: dict[str, tuple[str, list]] = {
    "asm": ("asm", _ASM_RULES),
    "c": ("c", _C_RULES),
    "caddyfile": ("caddyfile", _CADDYFILE_RULES),
    "cmake": ("cmake", _CMAKE_RULES),
    "cpp": ("c++", _CPP_RULES),
    "csharp": ("csharp", _CSHARP_RULES),
    "d": ("d", _D_RULES),
}


@functools.lru_cache(maxsize=None)
def _documents() -> dict[str, str]:
    return {
        language: _document(filetype, rules)
        for language, (filetype, rules) in _LANGUAGES.items()
    }


def definitions() -> dict[str, str]:
    """Return the YAML syntax documents of this module, keyed by language id."""
    return dict(_documents())