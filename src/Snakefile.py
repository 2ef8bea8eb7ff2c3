include: "Snakefile_const.py"

rule all:
    input:
        END / "tokens.json",
        END / "tokens.static.json",
        END / "tokens.resolved.json",

rule build_tokens:
    '''color scales + parametrized shadows, color-mix() deferred'''
    input:
        HUE_SAMPLES,
    output:
        END / "tokens.json",
    shell:
        """
        python build_tokens.py \
            --samples-csv {input} \
            --out-json {output}
        """

rule build_static_tokens:
    '''shadows with light-mode color/strength baked in'''
    input:
        HUE_SAMPLES,
    output:
        END / "tokens.static.json",
    shell:
        """
        python build_tokens.py \
            --samples-csv {input} \
            --static-shadows \
            --out-json {output}
        """

rule build_resolved_tokens:
    '''extrapolated steps mixed in OKLCH at build time'''
    input:
        HUE_SAMPLES,
    output:
        END / "tokens.resolved.json",
    shell:
        """
        python build_tokens.py \
            --samples-csv {input} \
            --resolve-mix \
            --static-shadows \
            --out-json {output}
        """
