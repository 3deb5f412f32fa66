# -*- latex -*-
#
# pldoc.sty: LaTeX style file for pldoc's LaTeX writer
#
# $Id$
#

"""
LaTeX style files (*.sty) for pldoc's LaTeX writer.  The writer's
stand-alone header loads C{pl.sty}; L{PL_STY} is its text, and
defines every command and environment the writer emits.
"""
__docformat__ = 'epytext en'

PL_STY = r"""
% pl.sty
%
% Authors: Edward Loper <edloper@seas.upenn.edu>
% URL: <http://epydoc.sf.net>
%
% This LaTeX style file defines the commands used by pldoc's latex
% writer (pldoc.docwriter.latex) to typeset predicate descriptions.
%
% $Id:$

\NeedsTeXFormat{LaTeX2e}%
\ProvidesPackage{pl}[2008/01/01 v1.0 PlDoc predicate documentation]

\RequirePackage{makeidx}
\RequirePackage{underscore}

% ======================================================================
% Characters

\newcommand{\bsl}{\ensuremath{\backslash}}

% ======================================================================
% Inline markup

% \arg is the math operator in plain LaTeX.
\renewcommand{\arg}[1]{\emph{#1}}
\newcommand{\const}[1]{\texttt{#1}}
\newcommand{\file}[1]{\texttt{#1}}
\newcommand{\predref}[2]{\texttt{#1/#2}}
\newcommand{\dcgref}[2]{\texttt{#1//#2}}

% \url[Label]{Target}
\newcommand{\url}[2][]{%
  \ifx\relax#1\relax\texttt{#2}\else#1\footnote{\texttt{#2}}\fi}

% ======================================================================
% Predicate descriptions
%
% \predicate[Attributes]{Name}{Arity}{Arguments}
% \dcg[Attributes]{Name}{Arity}{Arguments}
% \infixop{Name}{Left}{Right}
% \prefixop{Name}{Argument}
% \postfixop{Name}{Argument}

\newcommand{\predicate}[4][]{%
  \item[{\bf #2}\ifx\relax#4\relax\else(\emph{#4})\fi\hfill#1]%
  \index{#2/#3}\mbox{}\\}
\newcommand{\dcg}[4][]{%
  \item[{\bf #2}\ifx\relax#4\relax\else(\emph{#4})\fi//\hfill#1]%
  \index{#2//#3}\mbox{}\\}
\newcommand{\infixop}[3]{%
  \item[\emph{#2} {\bf #1} \emph{#3}]\index{#1/2}\mbox{}\\}
\newcommand{\prefixop}[2]{%
  \item[{\bf #1} \emph{#2}]\index{#1/1}\mbox{}\\}
\newcommand{\postfixop}[2]{%
  \item[\emph{#2} {\bf #1}]\index{#1/1}\mbox{}\\}

% Separates the signatures of one predicate.
\newcommand{\nodescription}{\vspace{-\itemsep}\vspace{-\parsep}}

\newcommand{\termitem}[2]{%
  \item[{\bf #1}\ifx\relax#2\relax\else(\emph{#2})\fi]}

% ======================================================================
% Tags and parameters

\newenvironment{tags}{%
  \begin{list}{}{\setlength{\leftmargin}{7em}%
                 \setlength{\labelwidth}{6.5em}}}{\end{list}}
\newcommand{\tag}[1]{\item[\textbf{#1}]}

\newenvironment{parameters}{%
  \par\noindent\begin{tabular}{ll}}{\end{tabular}\par}

% ======================================================================
% Code

\newenvironment{code}{%
  \par\small\verbatim}{\endverbatim\par}
"""

STYLESHEETS = {
    'pl': PL_STY,
    'default': PL_STY,
}
