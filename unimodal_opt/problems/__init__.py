from unimodal_opt.problems.unimodal_problem import UnimodalProblem, UnimodalProblemBuilder
